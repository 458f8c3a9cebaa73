import logging
from flask import Blueprint, request, jsonify, current_app
from flask_login import login_required
from legalassist.agents.risk_analysis_agent import RiskAnalysisAgent
from legalassist.agents.classification_agent import ClauseClassificationAgent
from legalassist.agents.simplification_agent import SimplificationAgent
from legalassist.agents.qa_agent import QAAgent
from legalassist.utils.auth_middleware import validate_json_data

logger = logging.getLogger(__name__)

agents_bp = Blueprint('agents', __name__)


def get_agents():
    """Get initialized agent instances"""
    latency_scale = current_app.config.get('AGENT_LATENCY_SCALE', 1.0)

    return {
        'risk_analysis': RiskAnalysisAgent(latency_scale),
        'classification': ClauseClassificationAgent(latency_scale),
        'simplification': SimplificationAgent(latency_scale),
        'qa': QAAgent(latency_scale)
    }


def _request_data():
    data = request.get_json(silent=True)
    # Bodies that are not JSON objects carry no fields
    return data if isinstance(data, dict) else {}


@agents_bp.route('/analyze-text', methods=['POST'])
@login_required
def analyze_text():
    """Analyze selected text for risks, review points or ambiguity"""
    try:
        data = _request_data()
        analysis = get_agents()['risk_analysis'].analyze_text(
            data.get('text', ''), data.get('analysisType')
        )
        return jsonify(analysis.to_dict()), 200

    except Exception as e:
        logger.exception("Text analysis failed")
        return jsonify({'message': 'Error analyzing text', 'error': str(e)}), 500


@agents_bp.route('/extract-clauses', methods=['POST'])
@login_required
def extract_clauses():
    """Extract legal clauses from document text"""
    try:
        data = _request_data()
        clauses = get_agents()['classification'].extract_clauses(data.get('text', ''))
        return jsonify([clause.to_dict() for clause in clauses]), 200

    except Exception as e:
        logger.exception("Clause extraction failed")
        return jsonify({'message': 'Error extracting clauses', 'error': str(e)}), 500


@agents_bp.route('/explain-simple', methods=['POST'])
@login_required
def explain_simple():
    """Explain selected text in plain English"""
    try:
        data = _request_data()
        explanation = get_agents()['simplification'].explain_simple(data.get('text', ''))
        return jsonify(explanation.to_dict()), 200

    except Exception as e:
        logger.exception("Explanation failed")
        return jsonify({'message': 'Error explaining text', 'error': str(e)}), 500


@agents_bp.route('/chat', methods=['POST'])
@login_required
@validate_json_data(['question'])
def chat():
    """Answer a question about the open document"""
    try:
        data = request.get_json()
        reply = get_agents()['qa'].answer_question(
            str(data['question']), data.get('documentText')
        )
        return jsonify(reply.to_dict()), 200

    except Exception as e:
        logger.exception("Chat failed")
        return jsonify({'message': 'Error processing chat', 'error': str(e)}), 500
