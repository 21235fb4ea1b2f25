import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from api.dependencies import get_tag_set
from mind_dump.models import TagSet, TagSetError

router = APIRouter()
logger = logging.getLogger(__name__)


class TagIn(BaseModel):
    label: str


@router.get("/tags")
async def list_tags(tag_set: TagSet = Depends(get_tag_set)) -> dict:
    return {"tags": [t.model_dump() for t in tag_set.tags]}


@router.post("/tags")
async def add_tag(payload: TagIn, tag_set: TagSet = Depends(get_tag_set)) -> dict:
    try:
        tag = tag_set.add(payload.label)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info(f"Tag available: {tag.id} ({tag.label})")
    return {"tag": tag.model_dump(), "tags": [t.model_dump() for t in tag_set.tags]}


@router.patch("/tags/{tag_id}")
async def rename_tag(
    tag_id: str, payload: TagIn, tag_set: TagSet = Depends(get_tag_set)
) -> dict:
    try:
        tag_set.get(tag_id)
    except TagSetError:
        raise HTTPException(status_code=404, detail=f"Unknown tag: {tag_id}")
    try:
        tag = tag_set.rename(tag_id, payload.label)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"tag": tag.model_dump()}


@router.delete("/tags/{tag_id}")
async def remove_tag(tag_id: str, tag_set: TagSet = Depends(get_tag_set)) -> dict:
    try:
        tag_set.get(tag_id)
    except TagSetError:
        raise HTTPException(status_code=404, detail=f"Unknown tag: {tag_id}")
    try:
        removed = tag_set.remove(tag_id)
    except TagSetError as e:
        raise HTTPException(status_code=400, detail=str(e))
    logger.info(f"Removed tag {removed.id} ({removed.label})")
    return {"removed": removed.model_dump(), "tags": [t.model_dump() for t in tag_set.tags]}
