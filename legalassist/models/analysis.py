"""
Analysis result types, one per analysis kind.

Each result serializes to the payload the client renders in its analysis
panel. ``type`` is always present so the client can pick the layout.
"""


class AnalysisResult:
    kind = None

    def __init__(self, confidence):
        self.confidence = confidence

    def _fields(self):
        raise NotImplementedError

    def to_dict(self):
        data = {'type': self.kind}
        data.update(self._fields())
        data['confidence'] = self.confidence
        return data


class RiskAnalysis(AnalysisResult):
    kind = 'risk'

    def __init__(self, risks, mitigations, confidence):
        super().__init__(confidence)
        self.risks = list(risks)
        self.mitigations = list(mitigations)

    def _fields(self):
        return {'risks': self.risks, 'mitigations': self.mitigations}


class ReviewAnalysis(AnalysisResult):
    kind = 'review'

    def __init__(self, strengths, weaknesses, recommendations, confidence):
        super().__init__(confidence)
        self.strengths = list(strengths)
        self.weaknesses = list(weaknesses)
        self.recommendations = list(recommendations)

    def _fields(self):
        return {
            'strengths': self.strengths,
            'weaknesses': self.weaknesses,
            'recommendations': self.recommendations
        }


class AmbiguityAnalysis(AnalysisResult):
    kind = 'ambiguity'

    def __init__(self, ambiguous_terms, clarifications, confidence):
        super().__init__(confidence)
        self.ambiguous_terms = list(ambiguous_terms)
        self.clarifications = list(clarifications)

    def _fields(self):
        return {
            'ambiguousTerms': self.ambiguous_terms,
            'clarifications': self.clarifications
        }


class GeneralAnalysis(AnalysisResult):
    """Fallback for any kind without a dedicated layout"""

    def __init__(self, kind, risks, suggestions, confidence):
        super().__init__(confidence)
        self.kind = kind
        self.risks = list(risks)
        self.suggestions = list(suggestions)

    def _fields(self):
        return {'risks': self.risks, 'suggestions': self.suggestions}


class Explanation:
    def __init__(self, original, simplified, key_points):
        self.original = original
        self.simplified = simplified
        self.key_points = list(key_points)

    def to_dict(self):
        return {
            'original': self.original,
            'simplified': self.simplified,
            'keyPoints': self.key_points
        }


class ChatReply:
    def __init__(self, response, timestamp):
        self.response = response
        self.timestamp = timestamp

    def to_dict(self):
        return {'response': self.response, 'timestamp': self.timestamp.isoformat()}
