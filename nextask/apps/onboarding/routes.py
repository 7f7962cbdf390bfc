"""
Onboarding API Routes

Flask Blueprint driving the onboarding slides remotely.
"""

import logging
from flask import Blueprint, jsonify

onboarding_bp = Blueprint('onboarding', __name__)
logger = logging.getLogger(__name__)

# OnboardingFlow instance will be set by webserver
onboarding_flow = None


def init_routes(flow):
    """
    Initialize routes with OnboardingFlow instance

    Args:
        flow: OnboardingFlow instance
    """
    global onboarding_flow
    onboarding_flow = flow
    logger.info("Initialized onboarding routes")


@onboarding_bp.route('/api/onboarding', methods=['GET'])
def get_onboarding():
    """Current slide and button state"""
    return jsonify(onboarding_flow.render())


@onboarding_bp.route('/api/onboarding/continue', methods=['POST'])
def continue_onboarding():
    """Next slide, or finish on the last one"""
    if not onboarding_flow.advance():
        if onboarding_flow.completed:
            return jsonify({'error': 'Onboarding already completed'}), 409
        return jsonify({'error': 'Failed to save onboarding status'}), 500

    return jsonify({'success': True, **onboarding_flow.render()})


@onboarding_bp.route('/api/onboarding/skip', methods=['POST'])
def skip_onboarding():
    """Finish onboarding immediately"""
    if not onboarding_flow.skip():
        if onboarding_flow.completed:
            return jsonify({'error': 'Onboarding already completed'}), 409
        return jsonify({'error': 'Failed to save onboarding status'}), 500

    return jsonify({'success': True, **onboarding_flow.render()})


@onboarding_bp.route('/api/onboarding/slide/<int:index>', methods=['POST'])
def go_to_slide(index):
    """Jump to a slide, as a swipe would"""
    onboarding_flow.go_to(index)
    return jsonify({'success': True, **onboarding_flow.render()})
