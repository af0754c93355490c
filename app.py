"""
Flask JSON API for the Lowcountry Locale Engine

Endpoints consumed by the listing form: address autocomplete, neighborhood
resolution, context for the text generator and authenticity feedback.
"""
from flask import Flask, request, jsonify
import random
import logging

from locale_engine import LocaleEngine
from locale_engine.processors.projection import build_context
from locale_engine.config import CLOSE_NAME_LIMIT, CLOSE_NAME_MIN_SCORE
from locale_engine.utils.matching_utils import token_sort_ratio

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s %(name)s: %(message)s'
)
logger = logging.getLogger(__name__)

app = Flask(__name__)
engine = LocaleEngine()


def _payload():
    """JSON body as a dict ({} when missing or not an object)."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def close_names(name, limit=CLOSE_NAME_LIMIT):
    """Canonical names that look like `name`, best first."""
    scored = []
    for record in engine.directory:
        score = token_sort_ratio(name, record.name)
        if score >= CLOSE_NAME_MIN_SCORE:
            scored.append((score, record.name))

    scored.sort(key=lambda item: -item[0])
    return [name for _, name in scored[:limit]]


@app.errorhandler(500)
def internal_error(error):
    return jsonify({
        'success': False,
        'error': 'Internal server error'
    }), 500


@app.route('/health')
def health():
    """Liveness check with directory sizes and cache usage"""
    return jsonify({
        'success': True,
        'status': 'ok',
        'stats': engine.get_stats()
    })


@app.route('/suggest')
def suggest():
    """Autocomplete: up to 8 place names with highlight segments"""
    query = request.args.get('q', '')

    suggestions = engine.suggest(query)

    return jsonify({
        'success': True,
        'query': query,
        'suggestions': [
            {
                'name': name,
                'highlight': list(engine.highlight(name, query))
            }
            for name in suggestions
        ]
    })


@app.route('/resolve', methods=['POST'])
def resolve():
    """Resolve an address to a neighborhood and its locale profile"""
    data = _payload()
    address = data.get('address')

    if not isinstance(address, str) or not address.strip():
        return jsonify({
            'success': False,
            'error': 'Address must be a non-empty string'
        }), 400

    try:
        profile = engine.locale_profile(address)
    except Exception as e:
        logger.exception(f"Failed to resolve '{address}'")
        return jsonify({
            'success': False,
            'error': str(e)
        }), 500

    return jsonify({
        'success': True,
        'address': address,
        'should_resolve': engine.should_resolve(address),
        'profile': profile
    })


@app.route('/authenticity', methods=['POST'])
def authenticity():
    """Score a generated description for local terminology"""
    data = _payload()
    description = data.get('description')

    if not isinstance(description, str):
        return jsonify({
            'success': False,
            'error': 'Description must be a string'
        }), 400

    return jsonify({
        'success': True,
        'result': engine.score_authenticity(description)
    })


@app.route('/neighborhoods')
def list_neighborhoods():
    """Canonical names with their aliases and zip codes, directory order"""
    return jsonify({
        'success': True,
        'neighborhoods': [
            {
                'name': record.name,
                'aliases': list(record.aliases),
                'zip_codes': list(record.zip_codes)
            }
            for record in engine.directory
        ]
    })


@app.route('/neighborhoods/<name>')
def get_neighborhood(name):
    """Full record by canonical name or alias (case-insensitive)"""
    record = engine.get_neighborhood(name)

    if record is None:
        return jsonify({
            'success': False,
            'error': f"Unknown neighborhood: {name}",
            'did_you_mean': close_names(name)
        }), 404

    return jsonify({
        'success': True,
        'neighborhood': record.to_dict()
    })


@app.route('/context', methods=['POST'])
def context():
    """Context paragraph for the text generator (seeded when `seed` is given)"""
    data = _payload()
    name = data.get('name')
    include_proximity = data.get('include_proximity', True)
    seed = data.get('seed')

    if not isinstance(name, str) or not name.strip():
        return jsonify({
            'success': False,
            'error': 'Neighborhood name must be a non-empty string'
        }), 400

    if seed is not None and not isinstance(seed, int):
        return jsonify({
            'success': False,
            'error': 'Seed must be an integer'
        }), 400

    if not isinstance(include_proximity, bool):
        return jsonify({
            'success': False,
            'error': 'include_proximity must be a boolean'
        }), 400

    record = engine.get_neighborhood(name)
    if record is None:
        return jsonify({
            'success': False,
            'error': f"Unknown neighborhood: {name}",
            'did_you_mean': close_names(name)
        }), 404

    rng = random.Random(seed) if seed is not None else engine.rng
    text = build_context(record, include_proximity, rng)

    return jsonify({
        'success': True,
        'neighborhood': record.name,
        'context': text
    })


if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=9797)
