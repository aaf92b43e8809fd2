import logging
from flask import Blueprint, request

from ..core.errors import TransformError
from ..core.transform import CaseDirective, transform

logger = logging.getLogger(__name__)

transform_router = Blueprint('transform_router', __name__)

HTML_HEADERS = {'Content-Type': 'text/html; charset=utf-8'}
TEXT_HEADERS = {'Content-Type': 'text/plain; charset=utf-8'}


class InvalidRequest(ValueError):
    """The request body is not a valid transform request."""


def parse_transform_request(payload) -> tuple[CaseDirective, str]:
    """
    Validate a decoded JSON body and pull out the directive and the HTML.

    Raises:
        InvalidRequest: If a field is missing, has the wrong type or an unknown value
    """
    if not isinstance(payload, dict):
        raise InvalidRequest("expected a JSON object with 'transform' and 'html' fields")

    for name in ('transform', 'html'):
        if name not in payload:
            raise InvalidRequest(f"missing field '{name}'")
        if not isinstance(payload[name], str):
            raise InvalidRequest(f"field '{name}' must be a string")

    try:
        directive = CaseDirective.from_value(payload['transform'])
    except ValueError as e:
        raise InvalidRequest(str(e)) from e

    return directive, payload['html']


@transform_router.route('/', methods=['GET'])
def hello():
    """Liveness check."""
    return "Hello, World!", 200, TEXT_HEADERS


@transform_router.route('/transform', methods=['POST'])
def transform_post():
    """
    Rewrite the case of paragraph text in the posted HTML.

    Expects ``{"transform": "uppercase" | "lowercase", "html": "..."}`` and
    answers with the transformed fragment, or a 400 with a readable message.
    """
    try:
        directive, markup = parse_transform_request(request.get_json(silent=True))
    except InvalidRequest as e:
        logger.warning(f"Rejected transform request: {e}")
        return f"Invalid request: {e}", 400, TEXT_HEADERS

    try:
        result = transform(markup, directive)
    except TransformError as e:
        logger.warning(f"Transform failed: {e}")
        return f"Invalid html: {e}", 400, TEXT_HEADERS

    return result, 200, HTML_HEADERS
