"""Entity screen endpoints: filtered list view, form submission and quick actions."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from exportdesk.application.schemas.screens import (
    ActionInfo,
    ActionRequest,
    FilterInfo,
    FormSubmission,
    OperationResponse,
    ReferenceOption,
    ScreenPageResponse,
    ScreenSummary,
)
from exportdesk.application.services import EntityForm, EntityListController
from exportdesk.domain.entities import OperationResult
from exportdesk.domain.exceptions import (
    EntityNotFoundError,
    InvalidActionValueError,
    UnknownActionError,
    UnknownResourceError,
)
from exportdesk.infrastructure.dependencies import ScreenRegistry, get_screen_registry

router = APIRouter(prefix="/screens", tags=["Screens"])


async def _controller(registry: ScreenRegistry, resource: str) -> EntityListController:
    try:
        return await registry.loaded_controller(resource)
    except UnknownResourceError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _record(controller: EntityListController, record_id: int) -> dict:
    try:
        return controller.get(record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


def _page_response(controller: EntityListController) -> ScreenPageResponse:
    page = controller.page()
    return ScreenPageResponse(
        resource=controller.definition.name,
        items=page.items,
        page=page.number,
        page_size=page.size,
        total=page.total,
        page_count=page.page_count,
        search=controller.filter_state.search_term,
        filters=controller.filter_state.active_selections(),
        loading=controller.loading,
        error=controller.error,
        summary=controller.summary,
    )


def _operation_response(result: OperationResult) -> OperationResponse:
    """Successful results pass through; failures become the upstream status."""
    if not result.ok:
        raise HTTPException(
            status_code=result.status_code or status.HTTP_502_BAD_GATEWAY,
            detail=result.message,
        )
    return OperationResponse(ok=True, message=result.message, record=result.record)


async def _submit(form: EntityForm, controller: EntityListController) -> OperationResponse:
    result = await form.submit(controller)
    if not result.ok and form.errors:
        raise HTTPException(
            status_code=422,
            detail={"message": result.message, "errors": form.errors},
        )
    return _operation_response(result)


@router.get("", response_model=list[ScreenSummary])
async def list_screens(
    registry: ScreenRegistry = Depends(get_screen_registry),
) -> list[ScreenSummary]:
    """Every entity screen the catalog defines."""
    summaries = []
    for definition in registry.catalog:
        controller = registry.controller(definition.name)
        summaries.append(
            ScreenSummary(
                name=definition.name,
                label=definition.label,
                plural=definition.plural,
                path=definition.path,
                filters=[
                    FilterInfo(
                        name=f.name,
                        kind=f.kind.value,
                        options=f.options,
                        selected=controller.filter_state.selections.get(f.name, ""),
                    )
                    for f in definition.filters
                ],
                actions=[
                    ActionInfo(name=a.name, method=a.method, options=a.options)
                    for a in definition.actions
                ],
                page_size=controller.page_size,
            )
        )
    return summaries


@router.get("/{resource}", response_model=ScreenPageResponse)
async def view_screen(
    resource: str,
    request: Request,
    search: str = Query("", description="Free-text search"),
    page: int = Query(1, ge=1),
    registry: ScreenRegistry = Depends(get_screen_registry),
) -> ScreenPageResponse:
    """Filtered, paginated view; any filter name may be passed as a query parameter."""
    controller = await _controller(registry, resource)
    selections = {
        f.name: request.query_params.get(f.name, "")
        for f in controller.definition.filters
    }
    await controller.apply_filters(search, selections)
    controller.go_to_page(page)
    return _page_response(controller)


@router.post("/{resource}/reload", response_model=ScreenPageResponse)
async def reload_screen(
    resource: str,
    registry: ScreenRegistry = Depends(get_screen_registry),
) -> ScreenPageResponse:
    """Re-fetch the collection; a failed read leaves it empty with ``error`` set."""
    controller = await _controller(registry, resource)
    await controller.reload()
    return _page_response(controller)


@router.post(
    "/{resource}/records",
    response_model=OperationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_record(
    resource: str,
    data: FormSubmission,
    registry: ScreenRegistry = Depends(get_screen_registry),
) -> OperationResponse:
    """Submit a create form."""
    controller = await _controller(registry, resource)
    form = registry.form(resource)
    form.open_create()
    form.update_fields(data.values)
    return await _submit(form, controller)


@router.put("/{resource}/records/{record_id}", response_model=OperationResponse)
async def update_record(
    resource: str,
    record_id: int,
    data: FormSubmission,
    registry: ScreenRegistry = Depends(get_screen_registry),
) -> OperationResponse:
    """Submit an edit form; omitted fields keep the record's current values."""
    controller = await _controller(registry, resource)
    form = registry.form(resource, record=_record(controller, record_id))
    form.update_fields(data.values)
    return await _submit(form, controller)


@router.delete("/{resource}/records/{record_id}", response_model=OperationResponse)
async def delete_record(
    resource: str,
    record_id: int,
    confirm: bool = Query(False, description="Must be true to actually delete"),
    registry: ScreenRegistry = Depends(get_screen_registry),
) -> OperationResponse:
    """Delete a record once the caller has confirmed."""
    controller = await _controller(registry, resource)
    _record(controller, record_id)
    result = await controller.delete(record_id, confirmed=confirm)
    if not confirm:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.message)
    return _operation_response(result)


@router.post(
    "/{resource}/records/{record_id}/actions/{action}",
    response_model=OperationResponse,
)
async def perform_action(
    resource: str,
    record_id: int,
    action: str,
    data: ActionRequest | None = None,
    registry: ScreenRegistry = Depends(get_screen_registry),
) -> OperationResponse:
    """Quick status change (toggle, release, status select)."""
    controller = await _controller(registry, resource)
    _record(controller, record_id)
    try:
        result = await controller.perform_action(
            record_id, action, data.value if data else None
        )
    except UnknownActionError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidActionValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return _operation_response(result)


@router.get("/{resource}/references", response_model=dict[str, list[ReferenceOption]])
async def list_references(
    resource: str,
    registry: ScreenRegistry = Depends(get_screen_registry),
) -> dict[str, list[ReferenceOption]]:
    """Dropdown options for every reference list the screen uses."""
    try:
        definition = registry.controller(resource).definition
        index = await registry.references(resource)
    except UnknownResourceError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return {
        reference.name: [ReferenceOption(**option) for option in index.options(reference.name)]
        for reference in definition.references
    }
