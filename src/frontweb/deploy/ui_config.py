"""Render the runtime configuration module consumed by the built website."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

UI_CONFIG_PATH = Path("src") / "config" / "aws-exports.ts"

# config key -> export name suffix
EXPORT_KEYS: dict[str, str] = {
    "aws_cognito_identity_pool_id": "IdentityPoolId",
    "aws_user_pools_id": "UserPoolId",
    "aws_user_pools_web_client_id": "UserPoolAppClientId",
    "aws_user_pool_domain": "UserPoolDomain",
    "aws_mobile_analytics_app_id": "AnalyticsAppId",
    "api_url": "APIUrl",
}


def collect_ui_values(
    project_name: str,
    region: str,
    exports: dict[str, str],
    cognito_region: str | None = None,
) -> dict[str, str]:
    """Map stack exports onto UI config keys; missing exports become empty strings."""
    found = {key: exports.get(f"{project_name}-{suffix}", "") for key, suffix in EXPORT_KEYS.items()}
    missing = [f"{project_name}-{EXPORT_KEYS[k]}" for k, v in found.items() if not v]
    if missing:
        logger.warning("Exports not found: %s", ", ".join(missing))
    return {
        "aws_project_region": region,
        "aws_cognito_identity_pool_id": found["aws_cognito_identity_pool_id"],
        "aws_cognito_region": cognito_region or region,
        "aws_user_pools_id": found["aws_user_pools_id"],
        "aws_user_pools_web_client_id": found["aws_user_pools_web_client_id"],
        "aws_user_pool_domain": found["aws_user_pool_domain"],
        "aws_mobile_analytics_app_id": found["aws_mobile_analytics_app_id"],
        "aws_mobile_analytics_app_region": region,
        "api_url": found["api_url"],
    }


def _quote(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def render_ui_config(values: dict[str, str]) -> str:
    lines = ["const awsmobile = {"]
    lines.extend(f"  {_quote(key)}: {_quote(value)}," for key, value in values.items())
    lines.append("};")
    lines.append("export default awsmobile;")
    return "\n".join(lines) + "\n"


def write_ui_config(project_dir: str | Path, content: str) -> Path:
    target = Path(project_dir) / UI_CONFIG_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content)
    logger.info("Wrote UI configuration to %s", target)
    return target
