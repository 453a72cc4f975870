from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from talenthub.api import deps
from talenthub.core.errors import NotFoundError
from talenthub.schemas.offer import Offer, OfferCreate, OfferUpdate
from talenthub.store.memory import RecruitmentStore

router = APIRouter(prefix="/offers", tags=["offers"])


@router.get("", response_model=list[Offer])
async def list_offers(store: RecruitmentStore = Depends(deps.get_store)):
    return store.list_offers()


@router.get("/application/{application_id}", response_model=list[Offer])
async def list_offers_by_application(application_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    return store.list_offers_by_application(deps.parse_id(application_id, "application"))


@router.get("/{offer_id}", response_model=Offer)
async def get_offer(offer_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    offer = store.get_offer(deps.parse_id(offer_id, "offer"))
    if offer is None:
        raise NotFoundError("Offer not found")
    return offer


@router.post("", response_model=Offer, status_code=status.HTTP_201_CREATED)
async def create_offer(payload: OfferCreate, store: RecruitmentStore = Depends(deps.get_store)):
    return store.create_offer(payload)


@router.put("/{offer_id}", response_model=Offer)
async def update_offer(offer_id: str, payload: OfferUpdate, store: RecruitmentStore = Depends(deps.get_store)):
    offer = store.update_offer(deps.parse_id(offer_id, "offer"), payload)
    if offer is None:
        raise NotFoundError("Offer not found")
    return offer


@router.delete("/{offer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_offer(offer_id: str, store: RecruitmentStore = Depends(deps.get_store)):
    if not store.delete_offer(deps.parse_id(offer_id, "offer")):
        raise NotFoundError("Offer not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
