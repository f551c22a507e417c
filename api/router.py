"""Demo API router: list demos and run them.

Runs are captured: the narration a demo would print to the console is
returned as transcript lines instead.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException

from api.schemas import DemoRunRequest, DemoRunResponse
from core.narration import capture_narration
from core.registry import DemoDefinition, registry
from patterns.domain_config import DemoConfig

router = APIRouter()


@router.get("", response_model=list[DemoDefinition])
async def list_demos(pattern: Optional[str] = None):
    return registry.list_demos(pattern)


@router.get("/{pattern}/{variant}", response_model=DemoDefinition)
async def get_demo(pattern: str, variant: str):
    definition = registry.get(pattern, variant)
    if definition is None:
        raise HTTPException(status_code=404, detail="Demo not found")
    return definition


@router.post("/{pattern}/{variant}", response_model=DemoRunResponse)
async def run_demo(pattern: str, variant: str, request: Optional[DemoRunRequest] = None):
    """Run a demo and return its narration.

    An unknown demo is a 404; an input the demo rejects (unknown channel,
    region, or an input it does not take) is a 422.
    """
    definition = registry.get(pattern, variant)
    if definition is None:
        raise HTTPException(status_code=404, detail="Demo not found")

    inputs = request.inputs() if request else {}
    with capture_narration() as transcript:
        try:
            registry.run(pattern, variant, config=DemoConfig.from_env(), **inputs)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc))

    return DemoRunResponse(
        pattern=pattern,
        variant=variant,
        title=definition.title,
        inputs=inputs,
        transcript=transcript.lines,
    )
