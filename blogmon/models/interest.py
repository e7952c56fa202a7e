"""
Interest profile entries.

An interest profile is supplied by configuration and never mutated by the
engine. Each entry names a topic, a non-negative weight and keyword synonyms;
the topic label itself always counts as a keyword.
"""

from dataclasses import dataclass, field


@dataclass
class Interest:
    """
    A single interest profile entry.

    Attributes:
        topic: Topic label (also matched as a keyword).
        weight: Non-negative importance of this interest.
        keywords: Ordered keyword synonyms.
    """

    topic: str
    weight: float = 1.0
    keywords: list[str] = field(default_factory=list)

    def all_keywords(self) -> list[str]:
        """Topic label followed by its synonyms, all lower-cased."""
        return [self.topic.lower()] + [keyword.lower() for keyword in self.keywords]

    def validate(self) -> list[str]:
        """
        Check this entry.

        Returns:
            List of problems (empty if valid).
        """
        errors = []
        label = self.topic or "<unnamed>"

        if not self.topic or not self.topic.strip():
            errors.append("interest topic cannot be empty")

        if self.weight < 0:
            errors.append(f"interest '{label}' has negative weight {self.weight}")

        if any(not keyword or not keyword.strip() for keyword in self.keywords):
            errors.append(f"interest '{label}' has an empty keyword")

        return errors

    def to_dict(self) -> dict:
        data = {"topic": self.topic, "weight": self.weight}
        if self.keywords:
            data["keywords"] = list(self.keywords)
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Interest":
        return cls(
            topic=str(data.get("topic", "")),
            weight=float(data.get("weight", 1.0)),
            keywords=[str(k) for k in (data.get("keywords") or [])],
        )
