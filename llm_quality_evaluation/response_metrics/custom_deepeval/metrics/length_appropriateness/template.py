from ..template import ExplanationTemplate

DETAILS = {
    80: "Optimal length for the given prompt.",
    60: "Reasonable length; slightly too short or long.",
    40: "Length is noticeably inappropriate.",
    0: "Significantly too short or excessively verbose.",
}


class LengthAppropriatenessTemplate(ExplanationTemplate):
    name = "Length Appropriateness"
    description = "Whether the response length matches the prompt"
    details = DETAILS
