"""Transfer route: push shared deal data from one calculator into another."""

from dataclasses import replace

from fastapi import APIRouter, HTTPException

from dealcalc.api.schemas import TransferRequest, TransferResponse
from dealcalc.engine.mapper import map_data
from dealcalc.engine.records import build_inputs, build_units, record_to_dict
from dealcalc.engine.session import push_data, record_for
from dealcalc.models.session import RECORD_ATTRS, UNIT_ATTRS, SessionState
from dealcalc.models.strategies import StrategyType

router = APIRouter(prefix="/api/v1", tags=["transfer"])


@router.post("/transfer", response_model=TransferResponse)
async def transfer(req: TransferRequest):
    try:
        source = StrategyType(req.source)
        destination = StrategyType(req.destination)
        changes = {RECORD_ATTRS[destination]: build_inputs(destination, req.destination_inputs)}
        changes[RECORD_ATTRS[source]] = build_inputs(source, req.source_inputs)
        if source in UNIT_ATTRS:
            changes[UNIT_ATTRS[source]] = build_units(source, req.source_units)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    session = replace(SessionState(), active=source, **changes)
    pushed = sorted(map_data(source, session, destination))
    session = push_data(session, source, destination)

    return TransferResponse(
        destination=destination.value,
        inputs=record_to_dict(record_for(session, destination)),
        pushed=pushed,
    )
