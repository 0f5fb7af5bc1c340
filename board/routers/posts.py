from fastapi import APIRouter, Depends

from board.dependencies import PaginationParams, get_post_service
from board.schemas import (
    CreatePostRequest,
    DeletePostResponse,
    PostPageResponse,
    PostResponse,
    UpdatePostRequest,
)
from board.services.post_service import PostService

router = APIRouter(prefix="/api/v1/posts", tags=["posts"])

@router.post("", response_model=PostResponse, summary="Create a post")
async def create_post(
    request: CreatePostRequest,
    service: PostService = Depends(get_post_service),
):
    return await service.create_post(request.title, request.content)

@router.get("/{post_id}", response_model=PostResponse, summary="Read a post")
async def read_post(post_id: int, service: PostService = Depends(get_post_service)):
    return await service.read_post_by_id(post_id)

@router.put("/{post_id}", response_model=PostResponse, summary="Update a post")
async def update_post(
    post_id: int,
    request: UpdatePostRequest,
    service: PostService = Depends(get_post_service),
):
    return await service.update_post(post_id, request.title, request.content)

@router.delete("/{post_id}", response_model=DeletePostResponse, summary="Delete a post")
async def delete_post(post_id: int, service: PostService = Depends(get_post_service)):
    return await service.delete_post(post_id)

@router.get("", response_model=PostPageResponse, summary="Read a page of posts")
async def list_posts(
    pagination: PaginationParams = Depends(),
    service: PostService = Depends(get_post_service),
):
    page_spec = pagination.page_spec
    page = await service.read_all_posts(page_spec)
    return PostPageResponse.from_page(page, page_spec)
