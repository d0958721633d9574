"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from tabsense_ml.inference import SharedInfrastructure, TabClassificationOrchestrator


def get_infra(request: Request) -> SharedInfrastructure:
    return request.app.state.infra


def get_orchestrator(request: Request) -> TabClassificationOrchestrator:
    return request.app.state.infra.orchestrator


InfraDep = Annotated[SharedInfrastructure, Depends(get_infra)]
OrchestratorDep = Annotated[TabClassificationOrchestrator, Depends(get_orchestrator)]
