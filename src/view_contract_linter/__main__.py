"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from view_contract_linter.infrastructure.di.container import ViewContractContainer
from view_contract_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = ViewContractContainer.get_instance()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        telemetry=container.get_telemetry_port(),
        reporter=container.get_reporter(),
        astroid_gateway=container.get_astroid_gateway(),
        filesystem=container.get_filesystem_gateway(),
        fixer_gateway=container.get_fixer_gateway(),
        fix_registry=container.get_fix_registry(),
        classifier=container.get_classifier(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
