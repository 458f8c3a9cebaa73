from legalassist.agents.base_agent import BaseAgent
from legalassist.models.analysis import (
    RiskAnalysis, ReviewAnalysis, AmbiguityAnalysis, GeneralAnalysis
)

RISKS = [
    'Potential ambiguity in termination clause',
    'Indemnification terms may be too broad',
    'Jurisdiction clause needs clarification'
]


class RiskAnalysisAgent(BaseAgent):
    latency = 1.0

    def analyze_text(self, text, analysis_type):
        """Analyze a passage; the result depends only on ``analysis_type``"""
        self._simulate_latency()

        if analysis_type == 'risk':
            return RiskAnalysis(
                risks=RISKS,
                mitigations=[
                    'Add specific termination notice requirements',
                    'Define scope of indemnification more clearly',
                    'Specify governing law jurisdiction'
                ],
                confidence=85
            )

        if analysis_type == 'review':
            return ReviewAnalysis(
                strengths=[
                    'Clear ownership of work product',
                    'Well-defined payment terms',
                    'Comprehensive confidentiality provisions'
                ],
                weaknesses=[
                    'Vague force majeure clause',
                    'Missing audit rights for service provider',
                    'Inadequate dispute resolution mechanism'
                ],
                recommendations=[
                    'Add specific force majeure events',
                    'Include audit rights clause',
                    'Specify arbitration process'
                ],
                confidence=78
            )

        if analysis_type == 'ambiguity':
            return AmbiguityAnalysis(
                ambiguous_terms=[
                    '"Reasonable efforts" without definition',
                    '"Material breach" not quantified',
                    '"Substantial portion" without specification'
                ],
                clarifications=[
                    'Define "reasonable efforts" as commercially reasonable steps',
                    'Specify material breach thresholds',
                    'Quantify "substantial portion" as 20% or more'
                ],
                confidence=92
            )

        return GeneralAnalysis(
            kind=analysis_type,
            risks=RISKS,
            suggestions=[
                'Consider adding specific termination notice requirements',
                'Define scope of indemnification more clearly',
                'Specify governing law jurisdiction'
            ],
            confidence=85
        )
