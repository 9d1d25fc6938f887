from flask import Flask, request, send_file
import io
import json
import logging
import os
import time

from .audio import is_supported_audio, resolve_mime_type
from .config import (
    MAX_TEMPERATURE,
    MIN_TEMPERATURE,
    GenerationSettings,
    parse_temperature,
)
from .errors import ConfigurationError, VerificationError
from .export import export_file_name, format_transcription
from .generator import generate_response
from .models import ProcessedResult
from .stats import estimate_stats
from .verification import parse_and_verify

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)

app = Flask(__name__)

EXPORT_KINDS = ("summary", "transcription")


def _error(message, status, **extra):
    body = {"error": message}
    body.update(extra)
    return body, status


def _verification_failed(exc: VerificationError):
    logger.info(json.dumps({"event": "verification_failed", "error": exc.message}))
    return _error(exc.message, 422, rawText=exc.raw_text)


@app.route("/healthz", methods=["GET"])
def healthz():
    return {"status": "ok"}, 200


@app.route("/transcribe", methods=["POST"])
def transcribe():
    try:
        upload = request.files.get("audioFile")
        if upload is None or not upload.filename:
            return _error("No file uploaded.", 400)
        logger.info(json.dumps({"event": "request", "file": upload.filename}))

        if not is_supported_audio(upload.filename):
            logger.info(json.dumps({"event": "skip_non_audio", "file": upload.filename}))
            return _error(f"Unsupported audio file: {upload.filename}", 415)

        try:
            temperature = parse_temperature(request.form.get("temperature"))
        except ConfigurationError as exc:
            return _error(str(exc), 400)
        if not MIN_TEMPERATURE <= temperature <= MAX_TEMPERATURE:
            return _error(
                f"Temperature must be between {MIN_TEMPERATURE} and {MAX_TEMPERATURE}",
                400,
            )

        instructions = request.form.get("systemInstructions")
        if instructions and not instructions.strip():
            return _error("System instructions cannot be empty.", 400)

        settings = GenerationSettings.from_env(
            system_instruction=instructions, temperature=temperature
        )

        start = time.monotonic()
        logger.info(
            json.dumps(
                {
                    "event": "start_generation",
                    "model": settings.model_name,
                    "temperature": settings.temperature,
                }
            )
        )
        raw_text = generate_response(
            upload.read(),
            resolve_mime_type(upload.filename, upload.mimetype),
            settings,
        )
        logger.info(json.dumps({"event": "generation_complete", "chars": len(raw_text)}))

        try:
            result = parse_and_verify(raw_text)
        except VerificationError as exc:
            return _verification_failed(exc)

        stats = estimate_stats(
            settings.system_instruction, raw_text, time.monotonic() - start
        )
        logger.info(
            json.dumps(
                {
                    "event": "transcription_verified",
                    "segments": len(result.transcription),
                    "processing_time": stats.processing_time,
                }
            )
        )
        body = result.to_dict()
        body["stats"] = stats.to_dict()
        return body, 200

    except ConfigurationError as e:
        logger.error(json.dumps({"event": "config_error", "error": str(e)}))
        return _error(str(e), 500)
    except Exception as e:
        logger.exception("Error in /transcribe")
        return _error(str(e) or "An internal server error occurred.", 500)


@app.route("/verify", methods=["POST"])
def verify():
    raw_text = request.get_data(as_text=True)
    try:
        result = parse_and_verify(raw_text)
    except VerificationError as exc:
        return _verification_failed(exc)
    return result.to_dict(), 200


@app.route("/export/<kind>", methods=["POST"])
def export(kind):
    if kind not in EXPORT_KINDS:
        return _error(f"Unknown export type: {kind}", 404)
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _error("Expected a JSON object.", 400)
    try:
        result = ProcessedResult.from_dict(data)
    except ValueError as exc:
        return _error(str(exc), 400)

    if kind == "summary":
        content = result.summary
    else:
        content = format_transcription(result.transcription)
    name = data.get("fileName")
    file_name = export_file_name(name if isinstance(name, str) else None, kind)
    logger.info(json.dumps({"event": "export", "kind": kind, "file": file_name}))
    return send_file(
        io.BytesIO(content.encode("utf-8")),
        mimetype="text/plain",
        as_attachment=True,
        download_name=file_name,
    )


if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port)
