"""
Analysis agents for legal document processing

This package contains one agent per analysis operation:
- RiskAnalysisAgent: Risk, review and ambiguity analysis
- ClauseClassificationAgent: Clause extraction
- SimplificationAgent: Plain English explanation
- QAAgent: Chat assistant
"""
