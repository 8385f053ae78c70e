from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from household.api.deps import get_db
from household.schemas.backup import BackupDocument, BackupImport, ImportSummary, ClearResponse
from household.services.backup_service import BackupService

router = APIRouter()

EXPORT_FILENAME = "expense-tracker-backup.json"


@router.get("/export", response_model=BackupDocument)
async def export_database(db: AsyncSession = Depends(get_db)):
    """Download all household data as a JSON backup."""
    service = BackupService(db)
    document = await service.export()
    return JSONResponse(
        content=document.model_dump(mode="json", by_alias=True),
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@router.post("/import", response_model=ImportSummary)
async def import_database(data: BackupImport, db: AsyncSession = Depends(get_db)):
    """
    Restore a JSON backup.

    Expenses and categories are replaced, split settings overwritten and
    historical snapshots added where missing.
    """
    service = BackupService(db)
    return await service.import_backup(data)


@router.delete("/clear", response_model=ClearResponse)
async def clear_database(db: AsyncSession = Depends(get_db)):
    """Delete all expenses and categories and reset the split settings."""
    service = BackupService(db)
    await service.clear()
    return ClearResponse(message="Database cleared")
