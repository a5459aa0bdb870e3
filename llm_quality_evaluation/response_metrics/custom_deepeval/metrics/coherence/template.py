from ..template import ExplanationTemplate

DETAILS = {
    80: "Excellent logical flow with strong connections between ideas.",
    60: "Good coherence with mostly clear transitions.",
    40: "Moderate coherence; some ideas could be better connected.",
    0: "Poor coherence; ideas seem disconnected or jumpy.",
}


class CoherenceTemplate(ExplanationTemplate):
    name = "Coherence"
    description = "Measures logical flow and topic consistency"
    details = DETAILS
