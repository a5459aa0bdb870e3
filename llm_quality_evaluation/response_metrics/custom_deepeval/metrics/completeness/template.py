from ..template import ExplanationTemplate

DETAILS = {
    80: "Thoroughly addresses all aspects of the prompt.",
    60: "Covers most key points from the prompt.",
    40: "Addresses some aspects but misses key points.",
    0: "Incomplete response; many prompt aspects not addressed.",
}


class CompletenessTemplate(ExplanationTemplate):
    name = "Completeness"
    description = "How well the response addresses the prompt"
    details = DETAILS
