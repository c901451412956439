from fastapi import Depends, FastAPI

from bytediff.routers import diff
from bytediff.services.diff_service import DiffService

app = FastAPI(
    title="Byte Diff Service",
    version="1.0",
    description="Upload a left and a right payload under one ID and get a byte-level diff report."
)

@app.get("/")
def status(service: DiffService = Depends(diff.get_diff_service)):
    return {
        "status": "running",
        "store": type(service.store).__name__,
    }

app.include_router(diff.router, prefix="/v1")
