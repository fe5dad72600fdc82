"""FastAPI dependency injection for quote services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from railquote.application.commands import GenerateQuoteCommand
from railquote.application.factory import ServiceFactory, get_factory
from railquote.infrastructure.diagram_renderer import DiagramRenderer


@lru_cache(maxsize=1)
def get_service_factory() -> ServiceFactory:
    """Get cached ServiceFactory instance."""
    return get_factory()


def get_generate_command(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> GenerateQuoteCommand:
    """Dependency for GenerateQuoteCommand."""
    return factory.create_generate_command()


def get_diagram_renderer(
    factory: Annotated[ServiceFactory, Depends(get_service_factory)],
) -> DiagramRenderer:
    return factory.get_diagram_renderer()


# Type aliases for cleaner endpoint signatures
ServiceFactoryDep = Annotated[ServiceFactory, Depends(get_service_factory)]
GenerateCommandDep = Annotated[GenerateQuoteCommand, Depends(get_generate_command)]
DiagramRendererDep = Annotated[DiagramRenderer, Depends(get_diagram_renderer)]
