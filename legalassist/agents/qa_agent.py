from datetime import datetime, timezone
from legalassist.agents.base_agent import BaseAgent
from legalassist.models.analysis import ChatReply

RESPONSES = {
    'risk': ('Based on my analysis, the main risks in this contract include: potential '
             'ambiguity in termination clauses, broad indemnification terms, and unclear '
             'jurisdiction specifications.'),
    'favor': ('This contract appears to favor the service provider more than the client, '
              'particularly in the liability and termination sections.'),
    'default': ("I've analyzed your question about the legal document. "
                "Here are the key points to consider...")
}


class QAAgent(BaseAgent):
    latency = 1.5

    def answer_question(self, question, document_text=None):
        """Pick a canned answer by keyword; ``document_text`` is not consulted"""
        self._simulate_latency()

        question_lower = (question or '').lower()
        response = RESPONSES['default']
        if 'risk' in question_lower:
            response = RESPONSES['risk']
        # "favor" takes precedence when both keywords appear
        if 'favor' in question_lower:
            response = RESPONSES['favor']

        return ChatReply(response=response, timestamp=datetime.now(timezone.utc))
