"""Tests for settings defaults, env overrides and config file loading."""

from __future__ import annotations

import json

import pytest

from frontweb.core.config import (
    AppSettings,
    DeployConfig,
    load_hosting_config,
    load_pipeline_config,
)
from frontweb.core.exceptions import ConfigurationError


def _write(tmp_path, name, data):
    path = tmp_path / name
    path.write_text(json.dumps(data))
    return path


PIPELINE = {
    "selfMutating": False,
    "repositoryName": "org/repo",
    "branchName": "main",
    "connectionArn": "arn:aws:codestar-connections:eu-west-1:111111111111:connection/abc",
    "webOutputDir": "website/build",
    "stages": [
        {"name": "Testing", "testing": True, "testingRoleArn": "role-x"},
        {"name": "Production", "domainName": "www.example.com", "hostedZoneId": "Z123"},
    ],
}


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.project_name == "BlueprintCdkFrontWeb"
    assert settings.region == "eu-west-1"
    assert settings.pipeline_stack == "BlueprintCdkFrontWeb-Pipeline"
    assert settings.dev_stage == "BlueprintCdkFrontWeb-Dev"
    assert settings.strict_domains is False


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FRONTWEB_PROJECT_NAME", "Shop")
    monkeypatch.setenv("FRONTWEB_PIPELINE_STACK_NAME", "ShopDelivery")
    monkeypatch.setenv("FRONTWEB_AWS_ENDPOINT_URL", "http://localhost:4566")
    settings = AppSettings()
    assert settings.pipeline_stack == "ShopDelivery"
    assert settings.dev_stage == "Shop-Dev"
    assert settings.aws.endpoint_url == "http://localhost:4566"


def test_pipeline_overrides_only_include_explicit_fields(monkeypatch):
    assert AppSettings().pipeline_overrides() == {}
    monkeypatch.setenv("FRONTWEB_REGION", "us-west-2")
    assert AppSettings().pipeline_overrides() == {"region": "us-west-2"}
    assert AppSettings(project_name="Shop").pipeline_overrides() == {
        "projectName": "Shop",
        "region": "us-west-2",
    }


def test_deploy_config_reads_pipeline_variables(monkeypatch):
    monkeypatch.setenv("WEB_BUCKET_NAME", "testing-webstack-web")
    monkeypatch.setenv("DISTRIBUTION_ID", "E123")
    config = DeployConfig()
    assert config.web_bucket_name == "testing-webstack-web"
    assert config.distribution_id == "E123"
    assert set(DeployConfig.model_fields) == {
        "web_bucket_name", "distribution_id", "web_build_dir", "web_project_dir", "aws_region",
    }


def test_deploy_config_reads_codebuild_region(monkeypatch):
    assert DeployConfig().aws_region is None
    monkeypatch.setenv("AWS_REGION", "us-east-2")
    assert DeployConfig().aws_region == "us-east-2"


class TestLoadPipelineConfig:
    def test_reads_camel_case_record(self, tmp_path):
        config = load_pipeline_config(
            _write(tmp_path, "infra.json", PIPELINE), projectName="Shop", region="eu-west-1"
        )
        assert config.project_name == "Shop"
        assert config.self_mutating is False
        assert [s.name for s in config.stages] == ["Testing", "Production"]
        assert config.stages[0].testing_role_arn == "role-x"
        assert config.stages[1].hosted_zone_id == "Z123"

    def test_none_overrides_are_ignored(self, tmp_path):
        data = dict(PIPELINE, projectName="FromFile", region="us-west-2")
        config = load_pipeline_config(_write(tmp_path, "infra.json", data), projectName=None)
        assert config.project_name == "FromFile"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_pipeline_config(tmp_path / "nope.json")

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_pipeline_config(path)

    def test_missing_required_field_raises(self, tmp_path):
        data = {k: v for k, v in PIPELINE.items() if k != "connectionArn"}
        with pytest.raises(ConfigurationError):
            load_pipeline_config(_write(tmp_path, "infra.json", data), projectName="P", region="r")

    def test_duplicate_stage_names_raise(self, tmp_path):
        data = dict(PIPELINE, stages=[{"name": "Testing"}, {"name": "Testing"}])
        with pytest.raises(ConfigurationError, match="duplicate stage name"):
            load_pipeline_config(_write(tmp_path, "infra.json", data), projectName="P", region="r")

    def test_unknown_stage_field_raises(self, tmp_path):
        data = dict(PIPELINE, stages=[{"name": "Testing", "domian": "typo.example.com"}])
        with pytest.raises(ConfigurationError):
            load_pipeline_config(_write(tmp_path, "infra.json", data), projectName="P", region="r")

    def test_empty_stage_list_is_allowed(self, tmp_path):
        data = dict(PIPELINE, stages=[])
        config = load_pipeline_config(_write(tmp_path, "infra.json", data), projectName="P", region="r")
        assert config.stages == ()

    def test_defaults_fill_only_missing_fields(self, tmp_path):
        data = dict(PIPELINE, region="ap-southeast-2")
        config = load_pipeline_config(
            _write(tmp_path, "infra.json", data),
            defaults={"projectName": "Default", "region": "eu-west-1"},
        )
        assert config.project_name == "Default"
        assert config.region == "ap-southeast-2"

    def test_overrides_beat_file_and_defaults(self, tmp_path):
        data = dict(PIPELINE, region="ap-southeast-2")
        config = load_pipeline_config(
            _write(tmp_path, "infra.json", data),
            defaults={"projectName": "Default", "region": "eu-west-1"},
            region="us-west-2",
        )
        assert config.region == "us-west-2"


class TestLoadHostingConfig:
    def test_empty_object_means_no_domain(self, tmp_path):
        config = load_hosting_config(_write(tmp_path, "local.json", {}))
        assert config.domain_name is None
        assert config.certificate_arn is None

    def test_reads_domain_fields(self, tmp_path):
        config = load_hosting_config(
            _write(tmp_path, "local.json", {"domainName": "dev.example.com", "certificateArn": "arn:cert"})
        )
        assert config.domain_name == "dev.example.com"
        assert config.certificate_arn == "arn:cert"

    def test_rejects_non_object(self, tmp_path):
        path = tmp_path / "local.json"
        path.write_text("[]")
        with pytest.raises(ConfigurationError, match="JSON object"):
            load_hosting_config(path)


def test_repository_configs_parse():
    from pathlib import Path

    root = Path(__file__).resolve().parents[2] / "config"
    config = load_pipeline_config(root / "infra-config.json", projectName="P", region="eu-west-1")
    assert len(config.stages) >= 1
    load_hosting_config(root / "local-config.json")
