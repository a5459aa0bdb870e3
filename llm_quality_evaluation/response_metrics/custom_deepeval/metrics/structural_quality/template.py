from ..template import ExplanationTemplate

DETAILS = {
    80: "Well-formatted with clear structure.",
    60: "Good structure with minor formatting issues.",
    40: "Basic structure; could use better formatting.",
    0: "Poor structure; lacks proper formatting.",
}


class StructuralQualityTemplate(ExplanationTemplate):
    name = "Structural Quality"
    description = "Formatting and organization quality"
    details = DETAILS
