from flask import Blueprint, request, jsonify

import meals
from utils import parse_form_encoded
from .page import form_page

router_bp = Blueprint('router', __name__)


@router_bp.route('/', methods=['GET'])
def do_get():
    action = request.args.get('action')
    if action is None:
        return form_page()
    envelope, status = meals.read(action)
    return jsonify(envelope), status


@router_bp.route('/', methods=['POST'])
def do_post():
    # Raw body: pairs split on the first '=' only
    params = parse_form_encoded(request.get_data(as_text=True))
    envelope, status = meals.write(params)
    return jsonify(envelope), status
