"""
Peptide Knowledge Base - Admin Ingestion Triggers

Privileged endpoints that kick off seed ingestion and live evidence refresh.
Both are gated behind an admin session.
"""

from __future__ import annotations

import hmac
import os
from functools import wraps
from typing import Any, Callable, Dict, Optional

from flask import Flask, jsonify, request, session
from werkzeug.security import check_password_hash

from config import Config, ConfigurationError
from database import KnowledgeBaseStore, StoreError, open_store
from live_refresh import refresh_live_evidence
from seed_ingest import IngestionError, ingest_seed_catalog


def _default_store_factory() -> KnowledgeBaseStore:
    return open_store(Config.require_database_url())


def validate_admin_login(username: str, password: str, config=Config) -> bool:
    """Check credentials against ADMIN_PASSWORD_HASH, else ADMIN_PASSWORD"""
    if not config.has_admin_config() or not password:
        return False
    if not hmac.compare_digest(username or "", config.ADMIN_USERNAME):
        return False
    if config.ADMIN_PASSWORD_HASH:
        return check_password_hash(config.ADMIN_PASSWORD_HASH, password)
    return hmac.compare_digest(password, config.ADMIN_PASSWORD)


def admin_required(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not session.get("is_admin"):
            return jsonify({"success": False, "error": "Unauthorized admin action."}), 401
        return f(*args, **kwargs)
    return wrapper


def _payload() -> Dict[str, Any]:
    if request.is_json:
        return request.get_json(silent=True) or {}
    return request.form.to_dict()


def _optional_int(value: Any) -> Optional[int]:
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def create_app(config=Config, store_factory: Optional[Callable[[], KnowledgeBaseStore]] = None,
               refresh_sources=None) -> Flask:
    """Build the admin app; store_factory and refresh_sources are injectable for tests"""
    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.SECRET_KEY
    make_store = store_factory or _default_store_factory

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------
    @app.route("/admin/login", methods=["POST"])
    def admin_login():
        data = _payload()
        username = str(data.get("username", "")).strip()
        password = str(data.get("password", ""))
        if not config.has_admin_config():
            return jsonify({"success": False, "error": "Admin login is not configured."}), 503
        if not validate_admin_login(username, password, config):
            app.logger.warning("Rejected admin login for %r", username)
            return jsonify({"success": False, "error": "Invalid credentials."}), 401
        session.clear()
        session["is_admin"] = True
        return jsonify({"success": True})

    @app.route("/admin/logout", methods=["POST"])
    def admin_logout():
        session.clear()
        return jsonify({"success": True})

    # -------------------------------------------------------------------------
    # Ingestion triggers
    # -------------------------------------------------------------------------
    @app.route("/admin/ingest/seed", methods=["POST"])
    @admin_required
    def ingest_seed():
        try:
            store = make_store()
        except (ConfigurationError, StoreError) as e:
            return jsonify({"success": False, "error": str(e)}), 500
        try:
            result = ingest_seed_catalog(store)
        except IngestionError as e:
            app.logger.exception("Seed ingestion failed")
            return jsonify({"success": False, "error": str(e)}), 500
        finally:
            store.close()
        return jsonify({"success": True, **result.to_dict()})

    @app.route("/admin/ingest/live-refresh", methods=["POST"])
    @admin_required
    def ingest_live_refresh():
        data = _payload()
        try:
            store = make_store()
        except (ConfigurationError, StoreError) as e:
            return jsonify({"success": False, "error": str(e)}), 500
        try:
            result = refresh_live_evidence(
                store,
                batch_size=_optional_int(data.get("batchSize")),
                sources_per_peptide=_optional_int(data.get("sourcesPerPeptide")),
                sources=refresh_sources,
            )
        except StoreError as e:
            # Batch selection itself failed; per-peptide errors never reach here
            app.logger.exception("Live refresh failed")
            return jsonify({"success": False, "error": str(e)}), 500
        finally:
            store.close()
        return jsonify({"success": True, **result.to_dict()})

    return app


app = create_app()


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)), debug=False)
