class Clause:
    def __init__(self, clause_type, text, confidence, start_index, end_index):
        self.clause_type = clause_type  # termination, indemnity, confidentiality, jurisdiction
        self.text = text
        self.confidence = confidence
        # Offsets into the source text; stub clauses carry fixed values
        self.start_index = start_index
        self.end_index = end_index

    def to_dict(self):
        """Convert clause to dictionary"""
        return {
            'type': self.clause_type,
            'text': self.text,
            'confidence': self.confidence,
            'startIndex': self.start_index,
            'endIndex': self.end_index
        }
