from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from board.pagination import Page, PageSpec


class CamelModel(BaseModel):
    """Serialises as camelCase; accepts both camelCase and snake_case input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Requests ---

class CreatePostRequest(CamelModel):
    title: str
    content: str


class UpdatePostRequest(CamelModel):
    title: str
    content: str


# --- Responses ---

class PostResponse(CamelModel):
    post_id: int
    title: str
    content: str


class DeletePostResponse(CamelModel):
    post_id: int


# --- Pagination ---

class SortInfo(CamelModel):
    property: str
    direction: str


class PostPageResponse(CamelModel):
    content: list[PostResponse]
    number: int
    size: int
    total_elements: int
    total_pages: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool
    sort: SortInfo

    @classmethod
    def from_page(cls, page: Page[PostResponse], page_spec: PageSpec) -> "PostPageResponse":
        return cls(
            content=page.items,
            number=page.page_number,
            size=page.page_size,
            total_elements=page.total_elements,
            total_pages=page.total_pages,
            number_of_elements=page.number_of_elements,
            first=page.is_first,
            last=page.is_last,
            empty=page.is_empty,
            sort=SortInfo(
                property=page_spec.sort_key,
                direction=page_spec.sort_direction.value,
            ),
        )
