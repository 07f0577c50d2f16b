"""Decision probe for UI guards."""

from fastapi import APIRouter

from src.storehub.api.dependencies import CurrentPrincipal, MembershipStoreDep, evaluate
from src.storehub.authz import resource_for
from src.storehub.core.logging import bind_scope_context
from src.storehub.schemas.access import AuthorizeRequest, DecisionRead

router = APIRouter(tags=["access"])


@router.post(
    "/authorize",
    response_model=DecisionRead,
    response_model_exclude_none=True,
    responses={
        200: {
            "description": "Decision for the caller",
            "content": {
                "application/json": {
                    "examples": {
                        "granted": {
                            "summary": "Allowed through brand inheritance",
                            "value": {
                                "ok": True,
                                "scope": "branch",
                                "effective_role": "STAFF",
                            },
                        },
                        "denied": {
                            "summary": "Membership suspended",
                            "value": {"ok": False, "reason": "INACTIVE"},
                        },
                    }
                }
            },
        },
    },
)
async def authorize_probe(
    request: AuthorizeRequest,
    principal: CurrentPrincipal,
    store: MembershipStoreDep,
) -> DecisionRead:
    """
    Report whether the caller may perform an action.

    Denials are returned in the body with status 200; this endpoint never
    raises for a denied decision.
    """
    bind_scope_context(request.brand_id, request.branch_id)
    resource = resource_for(request.action, request.brand_id, request.branch_id)
    decision = await evaluate(principal, request.action, resource, store)
    return DecisionRead(**decision.to_dict())
