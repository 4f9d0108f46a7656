# mipsasm/app.py
import logging
import os

from flask import Flask, request, jsonify
from flask_cors import CORS

from mipsasm.mips_assembler import MipsAssembler

logger = logging.getLogger(__name__)

CORS_ORIGIN = os.environ.get("MIPSASM_CORS_ORIGIN", "http://localhost:3000")

app = Flask(__name__)
# Adjust MIPSASM_CORS_ORIGIN for your frontend origin if different
CORS(app, resources={r"/api/*": {"origins": CORS_ORIGIN}})


@app.route('/')
def index():
    return "MIPS Assembler is running!"


@app.route('/api/ping', methods=['GET'])
def ping():
    logger.debug("Ping endpoint called")
    return jsonify({"message": "pong"})


@app.route('/api/assemble', methods=['POST'])
def handle_assemble():
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not isinstance(data.get('assembly'), str):
            return jsonify({"errors": [{"message": "Missing 'assembly' key in request."}]}), 400
        assembly_code = data['assembly']
        logger.debug(f"Received assembly: {assembly_code[:100]}...")
        # One assembler per request; runs never share a label table
        result = MipsAssembler().assemble(assembly_code)
        if result['errors']:
            logger.warning(f"Assembly failed: {result['errors']}")
        else:
            logger.debug(f"Assembly successful. Code length: {len(result['machine_code'])}")
        return jsonify(result)
    except Exception as e:
        logger.error(f"Error during assembly: {e}", exc_info=True)
        return jsonify({"errors": [{"message": f"Internal server error during assembly: {e}"}]}), 500


if __name__ == '__main__':
    logging.basicConfig(level=os.environ.get("MIPSASM_LOG_LEVEL", "INFO"))
    # Or run with `python -m flask --app mipsasm.app run` from the repository root
    app.run(debug=False, port=int(os.environ.get("MIPSASM_PORT", "5001")))
