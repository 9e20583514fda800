import pytest

from codestyle_linter.domain.config import ConfigurationLoader
from codestyle_linter.infrastructure.di.container import CodestyleContainer
from codestyle_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from codestyle_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from codestyle_linter.infrastructure.services.guidance_service import GuidanceService


class TestCodestyleContainer:
    def setup_method(self) -> None:
        CodestyleContainer.reset()

    def teardown_method(self) -> None:
        CodestyleContainer.reset()

    def test_initialization_registers_defaults(self) -> None:
        container = CodestyleContainer()
        assert isinstance(container.get_config_loader(), ConfigurationLoader)
        assert isinstance(container.get_guidance_service(), GuidanceService)
        assert isinstance(container.get_astroid_gateway(), AstroidGateway)
        assert isinstance(container.get_filesystem_gateway(), FileSystemGateway)

    def test_register_and_get_singleton(self) -> None:
        container = CodestyleContainer()
        mock_dep = {"foo": "bar"}
        container.register_singleton("MockDep", mock_dep)

        retrieved = container.get("MockDep")
        assert retrieved == mock_dep
        assert retrieved is mock_dep  # Same instance

    def test_get_missing_dependency_raises_error(self) -> None:
        container = CodestyleContainer()
        with pytest.raises(ValueError, match=r"Dependency 'Missing' not registered\."):
            container.get("Missing")

    def test_get_instance_is_shared_until_reset(self) -> None:
        first = CodestyleContainer.get_instance()
        assert CodestyleContainer.get_instance() is first
        CodestyleContainer.reset()
        assert CodestyleContainer.get_instance() is not first

    def test_reads_nearest_pyproject(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "allow.txt").write_text("", encoding="utf-8")
        (tmp_path / "pyproject.toml").write_text(
            '[tool.codestyle-linter]\nadditional_files = ["allow.txt"]\n', encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)
        container = CodestyleContainer()
        files = container.get_filesystem_gateway().additional_files(
            container.get_config_loader().additional_files
        )
        assert [f.path for f in files] == [str(tmp_path.resolve() / "allow.txt")]

    def test_missing_additional_file_not_supplied(self, tmp_path, monkeypatch) -> None:
        (tmp_path / "pyproject.toml").write_text(
            '[tool.codestyle-linter]\nadditional_files = ["TestAttributeAnalyzerDisallowedList.txt"]\n',
            encoding="utf-8",
        )
        monkeypatch.chdir(tmp_path)
        container = CodestyleContainer()
        files = container.get_filesystem_gateway().additional_files(
            container.get_config_loader().additional_files
        )
        assert files == []
