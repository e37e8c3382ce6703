"""REST API for the pitchfit engine."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, List, Tuple

from fastapi import FastAPI, HTTPException
from pydantic import ValidationError

from pitchfit.api.schemas import (
    AdaptableCandidateResponse,
    CompareRequest,
    CompatibilityResponse,
    FlexibilityRequest,
    FlexibilityResponse,
    FormationFitResponse,
    FormationResponse,
    FormationSlotResponse,
    FormationSummaryResponse,
    PositionFlexibilityResponse,
    PositionGroupResponse,
    PositionListItem,
    PositionResponse,
    RosterPayload,
    RosterPositionsResponse,
    SlotFitResponse,
    UniquePositionResponse,
)
from pitchfit.config import TacticalTables, default_tables
from pitchfit.config_loader import load_tables
from pitchfit.ingest import RosterReport, group_by_position, load_roster_with_report
from pitchfit.models import Formation, Player
from pitchfit.positions import PositionNormalizer
from pitchfit.scoring import (
    FlexibilityResult,
    FlexibilityScorer,
    FormationComparer,
    FormationComparison,
    FormationFit,
    FormationResolver,
)


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

_TABLES_ENV = "PITCHFIT_TABLES"


def _tables_from_env() -> TacticalTables:
    raw = os.getenv(_TABLES_ENV)
    if not raw:
        return default_tables()
    try:
        tables = load_tables(Path(raw))
    except (OSError, ValueError) as exc:
        logger.warning("Invalid tables profile %s=%s: %s; using bundled tables", _TABLES_ENV, raw, exc)
        return default_tables()
    logger.info("Loaded tables profile from %s", raw)
    return tables


def _flexibility_response(result: FlexibilityResult) -> FlexibilityResponse:
    return FlexibilityResponse(
        name=result.name,
        primary_positions=result.primary_positions,
        flexibility_score=result.flexibility_score,
        breakdown=[
            PositionFlexibilityResponse(
                position=item.position,
                category=item.category,
                compatible_positions=item.compatible_positions,
                flexibility_score=item.flexibility_score,
            )
            for item in result.breakdown
        ],
        explanation=result.explanation,
        compatible_positions=result.compatible_positions,
    )


def _formation_response(formation: Formation) -> FormationResponse:
    return FormationResponse(
        formation=formation.name,
        description=formation.description,
        tactical_notes=formation.tactical_notes,
        total_positions=formation.total_positions,
        positions=[
            FormationSlotResponse(
                position=slot.position,
                category=slot.category,
                required=slot.required,
                alternatives=list(slot.alternatives),
            )
            for slot in formation.slots
        ],
    )


def _fit_response(fit: FormationFit) -> FormationFitResponse:
    return FormationFitResponse(
        formation=fit.formation,
        description=fit.description,
        tactical_notes=fit.tactical_notes,
        compatibility_score=fit.compatibility_score,
        filled_slots=fit.filled_slots,
        total_slots=fit.total_slots,
        slots=[
            SlotFitResponse(
                position=slot.position,
                category=slot.category,
                required=slot.required,
                alternatives=list(slot.alternatives),
                available_players=slot.natural_count,
                fallback_players=slot.adaptable_count,
                total_available=slot.total_available,
                has_players=slot.has_players,
                natural=slot.natural_players,
                adaptable=[
                    AdaptableCandidateResponse(
                        name=candidate.name,
                        position=candidate.position,
                        category=candidate.category,
                    )
                    for candidate in slot.adaptable_players
                ],
                players=slot.players,
            )
            for slot in fit.slots
        ],
    )


def _summary_response(comparison: FormationComparison) -> FormationSummaryResponse:
    record = comparison.sub_formation
    summary = comparison.summary
    return FormationSummaryResponse(
        name=record.name,
        parent=record.parent,
        shape=record.shape,
        description=record.description,
        notes=record.notes,
        total_positions=summary.total_positions,
        position_breakdown=summary.position_breakdown,
        unique_positions=[
            UniquePositionResponse(position=pos.position, category=pos.category, count=pos.count)
            for pos in summary.unique_positions
        ],
    )


def create_app(tables: TacticalTables | None = None) -> FastAPI:
    app = FastAPI(title="pitchfit")
    tables = tables or _tables_from_env()
    app.state.tables = tables
    normalizer = PositionNormalizer(tables)
    scorer = FlexibilityScorer(tables)
    resolver = FormationResolver(tables)
    comparer = FormationComparer(tables)

    def parse_roster_with_report(payload: RosterPayload) -> Tuple[List[Player], RosterReport]:
        try:
            return load_roster_with_report(payload.players, tables=tables)
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail=f"Invalid roster: {exc}") from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    def parse_roster(payload: RosterPayload) -> List[Player]:
        roster, _ = parse_roster_with_report(payload)
        return roster

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/positions", response_model=list[PositionListItem])
    async def list_positions() -> list[PositionListItem]:
        return [
            PositionListItem(
                standard=mapping.standard,
                category=mapping.category,
                description=mapping.description,
                variations=list(mapping.variations),
            )
            for mapping in tables.position_mappings
        ]

    @app.get("/positions/{raw}", response_model=PositionResponse)
    async def describe_position(raw: str) -> PositionResponse:
        entry = normalizer.compatibility(raw)
        return PositionResponse(
            raw=raw,
            standard=normalizer.standardize(raw),
            category=normalizer.category(raw),
            description=normalizer.description(raw),
            variations=normalizer.variations(raw),
            tactical_alternatives=normalizer.tactical_alternatives(raw),
            compatibility=(
                CompatibilityResponse(compatible=list(entry.compatible), score=entry.score)
                if entry is not None
                else None
            ),
        )

    @app.post("/players/flexibility", response_model=FlexibilityResponse)
    async def player_flexibility(request: FlexibilityRequest) -> FlexibilityResponse:
        return _flexibility_response(scorer.score(request.name, request.positions))

    @app.post("/roster/flexibility", response_model=list[FlexibilityResponse])
    async def roster_flexibility(payload: RosterPayload) -> list[FlexibilityResponse]:
        roster = parse_roster(payload)
        return [_flexibility_response(result) for result in scorer.rank(roster)]

    @app.post("/roster/positions", response_model=RosterPositionsResponse)
    async def roster_positions(payload: RosterPayload) -> RosterPositionsResponse:
        roster, report = parse_roster_with_report(payload)
        if report.skipped_rows:
            logger.info("Skipped %d roster rows: %s", len(report.skipped_rows), ", ".join(report.skipped_rows))
        return RosterPositionsResponse(
            total_rows=report.total_rows,
            players=report.players,
            skipped_rows=report.skipped_rows,
            positions=[
                PositionGroupResponse(
                    position=group.position,
                    category=group.category,
                    players=group.players,
                    count=group.count,
                )
                for group in group_by_position(roster, tables=tables)
            ],
        )

    @app.get("/formations")
    async def list_formations() -> dict[str, Any]:
        return {
            "formations": tables.formation_names(),
            "layouts": [
                {"name": record.name, "parent": record.parent, "shape": record.shape}
                for record in comparer.sub_formations()
            ],
        }

    @app.post("/formations/compare", response_model=list[FormationSummaryResponse])
    async def compare(request: CompareRequest) -> list[FormationSummaryResponse]:
        try:
            comparisons = comparer.compare(request.formations)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return [_summary_response(comparison) for comparison in comparisons]

    @app.get("/formations/{name}", response_model=FormationResponse)
    async def get_formation(name: str) -> FormationResponse:
        formation = tables.find_formation(name)
        if formation is None:
            raise HTTPException(status_code=404, detail="Formation not found")
        return _formation_response(formation)

    @app.post("/formations/{name}/fit", response_model=FormationFitResponse)
    async def formation_fit(name: str, payload: RosterPayload) -> FormationFitResponse:
        roster = parse_roster(payload)
        fit = resolver.resolve(name, roster)
        logger.info(
            "Resolved %s against %d players: %d/%d slots covered",
            name,
            len(roster),
            fit.filled_slots,
            fit.total_slots,
        )
        return _fit_response(fit)

    return app
