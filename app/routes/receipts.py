from fastapi import APIRouter, Depends, HTTPException, Request

from ..schemas import IdResponse, PointsResponse, Receipt
from ..services.scoring import score_receipt
from ..services.store import ReceiptNotFound, ResultStore
from app.utils.logging import logger

router = APIRouter(prefix="/receipts", tags=["receipts"])

def get_store(request: Request) -> ResultStore:
    return request.app.state.store

@router.post("/process", response_model=IdResponse)
def process_receipt(receipt: Receipt, store: ResultStore = Depends(get_store)):
    result = score_receipt(receipt)
    receipt_id = store.put(result.points, receipt)
    logger.info("Receipt %s from %r scored %s", receipt_id, receipt.retailer, result.points)
    logger.debug("Receipt %s awarding rules: %s", receipt_id, result.reasons)
    return IdResponse(id=receipt_id)

@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str, store: ResultStore = Depends(get_store)):
    try:
        points = store.get(receipt_id)
    except ReceiptNotFound:
        logger.info("Points lookup for unknown receipt %s", receipt_id)
        raise HTTPException(status_code=404, detail="No receipt found for that ID.")
    return PointsResponse(points=points)
