from legalassist.agents.base_agent import BaseAgent
from legalassist.models.clause import Clause

STUB_CLAUSES = [
    ('termination',
     'Either party may terminate this agreement with 30 days written notice.',
     0.92, 245, 312),
    ('indemnity',
     'The Provider shall indemnify and hold harmless the Client from any claims.',
     0.88, 456, 523),
    ('confidentiality',
     'Both parties agree to maintain confidentiality of proprietary information.',
     0.95, 678, 752),
    ('jurisdiction',
     'This agreement shall be governed by the laws of [State/Country].',
     0.87, 890, 951),
]


class ClauseClassificationAgent(BaseAgent):
    latency = 0.8

    def extract_clauses(self, text):
        """Return the illustrative clause set.

        Offsets are fixed and do not point into ``text``.
        """
        self._simulate_latency()
        return [Clause(*fields) for fields in STUB_CLAUSES]
