from typing import ClassVar


class ExplanationTemplate:
    """Presentational text for one quality metric.

    `details` maps the lowest score of a tier to the text shown for it.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    details: ClassVar[dict[int, str]]

    @classmethod
    def detail_for(cls, score: float) -> str:
        tiers = sorted(cls.details, reverse=True)
        for lowest_score in tiers:
            if score >= lowest_score:
                return cls.details[lowest_score]
        return cls.details[tiers[-1]]
