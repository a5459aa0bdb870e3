from ..template import ExplanationTemplate

DETAILS = {
    80: "Very easy to read and understand.",
    60: "Moderately easy to read; appropriate complexity.",
    40: "Somewhat difficult to read; complex sentences.",
    0: "Hard to read; overly complex or poorly structured.",
}


class ReadabilityTemplate(ExplanationTemplate):
    name = "Readability"
    description = "How easy the text is to read and understand"
    details = DETAILS
