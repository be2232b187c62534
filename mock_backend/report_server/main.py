from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse
from pathlib import Path
import json
import os

app = FastAPI(title="Mock Report Server", version="1.0.0")
# Support both local development and Docker
DATA_DIR = Path("/report_stub") if os.path.exists("/report_stub") else Path(__file__).resolve().parent / "data"

# Received files, kept in memory only; this mock never parses them
RECEIVED_UPLOADS: list[dict] = []


@app.get("/health")
def health(): return {"status": "ok"}


@app.get("/api/reports")
def get_reports():
    file = DATA_DIR / "reports.json"
    if not file.exists():
        return JSONResponse(content=[])
    return JSONResponse(content=json.loads(file.read_text(encoding="utf-8")))


@app.post("/api/upload", status_code=201)
async def upload_report(file: UploadFile = File(...)):
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="empty file")
    RECEIVED_UPLOADS.append({"filename": file.filename, "size_bytes": len(content)})
    return {"message": "File uploaded", "filename": file.filename}
