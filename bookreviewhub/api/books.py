"""Book catalogue endpoints (bearer token required)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from bookreviewhub.api.deps import get_book_service, require_authenticated
from bookreviewhub.core.context import IdentityContext
from bookreviewhub.schemas.book import BookItem
from bookreviewhub.schemas.response import SuccessResponse
from bookreviewhub.services.book_service import BookService

router = APIRouter()


@router.get("", response_model=SuccessResponse[list[BookItem]])
def list_books(
    _identity: Annotated[IdentityContext, Depends(require_authenticated)],
    book_service: Annotated[BookService, Depends(get_book_service)],
) -> SuccessResponse[list[BookItem]]:
    return SuccessResponse[list[BookItem]](
        status=200,
        message="OK",
        data=[BookItem.model_validate(b) for b in book_service.list_books()],
    )
