"""Dependency Wiring Unit Tests"""
from charon.application.filters import (
    AllOfPathFilter,
    AlwaysProcessPathFilter,
    BucketDenyListPathFilter,
    PrefixPathFilter,
)
from charon.infrastructure.config import Settings
from charon.infrastructure.container import (
    build_metadata_gateway,
    build_path_filter,
    create_use_case,
)
from charon.infrastructure.gateways.s3 import S3MetadataGateway


class TestBuildPathFilter:
    """build_path_filter のテスト"""

    def test_default_is_always_process(self):
        """正常: フィルタ設定が無ければ AlwaysProcess"""
        settings = Settings(_env_file=None)

        assert not settings.has_path_filter
        assert isinstance(build_path_filter(settings), AlwaysProcessPathFilter)

    def test_single_filter(self):
        settings = Settings(_env_file=None, filter_key_prefixes=["reports/"])

        assert isinstance(build_path_filter(settings), PrefixPathFilter)

    def test_combined_filters(self):
        """正常: 複数設定は AllOf で合成"""
        settings = Settings(
            _env_file=None,
            filter_denied_buckets=["quarantine"],
            filter_key_suffixes=[".csv"],
            filter_key_pattern=r"^reports/",
        )

        path_filter = build_path_filter(settings)

        assert isinstance(path_filter, AllOfPathFilter)
        assert isinstance(path_filter.filters[0], BucketDenyListPathFilter)
        assert len(path_filter.filters) == 3
        assert path_filter.should_process("data-bucket", "reports/2024.csv")
        assert not path_filter.should_process("quarantine", "reports/2024.csv")
        assert not path_filter.should_process("data-bucket", "exports/2024.csv")


class TestSettingsFromEnvironment:
    def test_list_settings_parsed_from_json(self, monkeypatch):
        monkeypatch.setenv("CHARON_FILTER_DENIED_BUCKETS", '["quarantine", "tmp"]')
        monkeypatch.setenv("CHARON_AWS_REGION", "ap-northeast-1")

        settings = Settings(_env_file=None)

        assert settings.filter_denied_buckets == ["quarantine", "tmp"]
        assert settings.aws_region == "ap-northeast-1"


class TestCreateUseCase:
    def test_builds_s3_gateway_for_region(self):
        settings = Settings(_env_file=None, aws_region="eu-west-1", s3_max_attempts=5)

        gateway = build_metadata_gateway(settings)

        assert isinstance(gateway, S3MetadataGateway)
        assert gateway.region == "eu-west-1"
        assert gateway.client.meta.region_name == "eu-west-1"

    def test_injected_collaborators_are_used(self, gateway_factory):
        gateway = gateway_factory()
        path_filter = BucketDenyListPathFilter(["quarantine"])

        use_case = create_use_case(
            settings=Settings(_env_file=None),
            metadata_gateway=gateway,
            path_filter=path_filter,
        )

        assert use_case.path_filter is path_filter
