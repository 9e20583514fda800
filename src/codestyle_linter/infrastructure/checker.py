"""
Pylint plugin entry point - composition root for the checker plugin.
Lives in infrastructure as it creates the container and wires dependencies.

    pylint --load-plugins=codestyle_linter.infrastructure.checker src/
"""

from pylint.lint import PyLinter

from codestyle_linter.infrastructure.di.container import CodestyleContainer
from codestyle_linter.use_cases.analysis_session import CancellationToken
from codestyle_linter.use_cases.checks.conventions import ConventionChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = CodestyleContainer.get_instance()
    config_loader = container.get_config_loader()
    ast_gateway = container.get_astroid_gateway()
    additional_files = container.get_filesystem_gateway().additional_files(
        config_loader.additional_files
    )
    registry = container.get_guidance_service().get_registry()

    linter.register_checker(
        ConventionChecker(
            linter,
            symbol_gateway=ast_gateway,
            type_resolver=ast_gateway,
            config_loader=config_loader,
            registry=registry,
            additional_files=additional_files,
            # set by an embedding host to abandon the remaining visits
            cancellation_token=CancellationToken(),
        )
    )
