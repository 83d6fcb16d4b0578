"""
Skill taxonomy - the static catalog of recognized skills grouped by category.

A taxonomy is immutable once built. The built-in catalog is exposed as
``DEFAULT_TAXONOMY``; components take a taxonomy argument so a smaller one
can be substituted (e.g. in tests) without touching module state.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from .normalize import normalize


LANGUAGES = "Programming Languages"
FRAMEWORKS = "Frameworks & Libraries"
DATABASES = "Databases"
CLOUD_DEVOPS = "Cloud & DevOps"
DATA_AI = "Data Science & AI"
MOBILE = "Mobile Development"
PROCESS = "Project Management & Soft Skills"


DEFAULT_SKILL_CATEGORIES = {
    LANGUAGES: [
        "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "PHP", "Ruby",
        "Go", "Rust", "Kotlin", "Swift", "Scala", "R", "MATLAB", "Perl", "Shell",
        "Bash", "SQL", "Dart",
    ],
    FRAMEWORKS: [
        "HTML", "CSS", "React", "Angular", "Vue.js", "Node.js", "Express",
        "Django", "Flask", "FastAPI", "Spring", "Spring Boot", "Laravel", "Rails",
        "ASP.NET", "Next.js", "Nuxt.js", "Svelte", "jQuery", "Bootstrap",
        "Tailwind CSS", "Sass", "Webpack", "GraphQL",
    ],
    DATABASES: [
        "MySQL", "PostgreSQL", "MongoDB", "Redis", "SQLite", "Oracle",
        "SQL Server", "Cassandra", "Elasticsearch", "Firebase", "DynamoDB", "Neo4j",
    ],
    CLOUD_DEVOPS: [
        "AWS", "Azure", "GCP", "Google Cloud", "Docker", "Kubernetes", "Jenkins",
        "Terraform", "Ansible", "Git", "GitHub", "GitLab", "GitHub Actions",
        "CI/CD", "Linux", "Unix", "Nginx", "Apache", "Prometheus", "Grafana",
    ],
    DATA_AI: [
        "Machine Learning", "Deep Learning", "TensorFlow", "PyTorch", "Pandas",
        "NumPy", "scikit-learn", "NLP", "Computer Vision", "Data Analysis",
        "Statistics", "Excel", "Tableau",
    ],
    MOBILE: [
        "Android", "iOS", "React Native", "Flutter", "Xamarin", "Cordova", "Ionic",
    ],
    PROCESS: [
        "Agile", "Scrum", "Kanban", "Jira", "Project Management", "Leadership",
        "Team Management", "Communication", "Problem Solving",
    ],
}


@dataclass(frozen=True)
class SkillTaxonomy:
    """Ordered, read-only set of (category, canonical skill name) pairs."""
    entries: tuple[tuple[str, str], ...]
    _index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        entries = tuple((str(category), str(name)) for category, name in self.entries)
        index = {}
        for position, (category, name) in enumerate(entries):
            key = normalize(name)
            if not key:
                raise ValueError(f"Empty skill name in category '{category}'")
            if key in index:
                raise ValueError(f"Duplicate skill in taxonomy: '{name}'")
            index[key] = position

        object.__setattr__(self, "entries", entries)
        object.__setattr__(self, "_index", MappingProxyType(index))

    @classmethod
    def from_categories(cls, categories: Mapping[str, list[str]]) -> "SkillTaxonomy":
        """Build a taxonomy from a ``{category: [skill, ...]}`` mapping."""
        return cls(tuple(
            (category, skill)
            for category, skills in categories.items()
            for skill in skills
        ))

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and normalize(name) in self._index

    @property
    def categories(self) -> list[str]:
        """Category names in declaration order."""
        seen = []
        for category, _ in self.entries:
            if category not in seen:
                seen.append(category)
        return seen

    @property
    def skills(self) -> list[str]:
        return [name for _, name in self.entries]

    def skills_in(self, category: str) -> list[str]:
        return [name for cat, name in self.entries if cat == category]

    def position(self, name: str) -> Optional[int]:
        """Declaration index of a skill, or None if it is unknown."""
        return self._index.get(normalize(name))

    def canonical(self, name: str) -> Optional[str]:
        """Canonical spelling of a known skill (e.g. 'node.js' -> 'Node.js')."""
        position = self.position(name)
        return None if position is None else self.entries[position][1]

    def category_of(self, name: str) -> Optional[str]:
        position = self.position(name)
        return None if position is None else self.entries[position][0]


DEFAULT_TAXONOMY = SkillTaxonomy.from_categories(DEFAULT_SKILL_CATEGORIES)
