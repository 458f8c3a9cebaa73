from legalassist.agents.base_agent import BaseAgent
from legalassist.models.analysis import Explanation

SIMPLIFIED = (
    "This part of the contract says that if something goes wrong and someone gets sued, "
    "one party (usually the service provider) will take responsibility and pay for any "
    "legal costs or damages. It's like having insurance - they're saying 'don't worry, "
    "we'll handle it if there's a problem.'"
)

KEY_POINTS = [
    'One party protects the other from lawsuits',
    'They agree to pay legal costs if problems arise',
    'This is common in business contracts'
]


class SimplificationAgent(BaseAgent):
    latency = 1.2

    def explain_simple(self, text):
        """Pair the selected text with a plain-English explanation"""
        self._simulate_latency()
        return Explanation(original=text, simplified=SIMPLIFIED, key_points=KEY_POINTS)
