from typing import Any, Optional, cast

from codestyle_linter.domain.config import ConfigurationLoader
from codestyle_linter.infrastructure.config_file_loader import ConfigFileLoader
from codestyle_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from codestyle_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from codestyle_linter.infrastructure.services.guidance_service import GuidanceService


class CodestyleContainer:
    """Dependency Injection Container for the convention linter."""

    _instance: Optional["CodestyleContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_dict, project_root = ConfigFileLoader.load_config_from_fs()
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config_dict))
        self.register_singleton("GuidanceService", GuidanceService())
        self.register_singleton("AstroidGateway", AstroidGateway())
        # additional_files in pyproject.toml are relative to that file
        self.register_singleton("FileSystemGateway", FileSystemGateway(base_dir=project_root))

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_guidance_service(self) -> GuidanceService:
        return cast(GuidanceService, self.get("GuidanceService"))

    def get_astroid_gateway(self) -> AstroidGateway:
        return cast(AstroidGateway, self.get("AstroidGateway"))

    def get_filesystem_gateway(self) -> FileSystemGateway:
        return cast(FileSystemGateway, self.get("FileSystemGateway"))

    @classmethod
    def get_instance(cls) -> "CodestyleContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = CodestyleContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
