import os
import uuid
from fastapi import FastAPI, File, UploadFile, HTTPException
from fastapi.middleware.cors import CORSMiddleware
import aiofiles
from config import get_settings
from services.pdf_processor import PDFProcessor
from services.resume_analyzer import ResumeAnalyzer
from services.exceptions import AnalysisError, ValidationError
from models.resume_models import AnalysisReport, AnalyzeTextRequest
import logging


settings = get_settings()

app = FastAPI(title=settings.app_title, version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allow_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Initialize services
pdf_processor = PDFProcessor()
resume_analyzer = ResumeAnalyzer()

SUPPORTED_CONTENT_TYPES = {"application/pdf", "text/plain"}

# Ensure upload directory exists
os.makedirs(settings.upload_dir, exist_ok=True)

@app.get("/")
async def root():
    return {"message": "Resume Career Assessment API is working"}

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "pdf_processor": "running",
            "resume_analyzer": "running"
        }
    }


def run_analysis(text: str) -> AnalysisReport:
    """Run the analyzer, translating pipeline errors into HTTP errors"""
    try:
        return resume_analyzer.analyze(text)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except AnalysisError as e:
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/analyze", response_model=AnalysisReport)
async def analyze_text(request: AnalyzeTextRequest):
    """
    Analyze resume text that was already extracted by the client
    """
    return run_analysis(request.text)


@app.post("/upload-resume", response_model=AnalysisReport)
async def upload_resume(file: UploadFile = File(...)):
    """
    Upload a PDF or plain-text resume and analyze it
    """
    media_type = (file.content_type or "").split(";")[0].strip().lower()
    if media_type not in SUPPORTED_CONTENT_TYPES:
        raise HTTPException(status_code=400, detail="Only PDF and plain text files are supported")

    content = await file.read()
    if len(content) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=400, detail=f"File size must be less than {settings.max_upload_mb}MB"
        )

    logger.info(f"Processing file: {file.filename}")

    if media_type == "text/plain":
        try:
            extracted_text = content.decode("utf-8")
        except UnicodeDecodeError:
            raise HTTPException(status_code=400, detail="Text files must be UTF-8 encoded")
    else:
        safe_name = os.path.basename(file.filename or "resume.pdf")
        file_path = os.path.join(settings.upload_dir, f"{uuid.uuid4().hex}_{safe_name}")
        try:
            async with aiofiles.open(file_path, 'wb') as f:
                await f.write(content)
            extracted_text = pdf_processor.extract_text(file_path)
        finally:
            if os.path.exists(file_path):
                os.remove(file_path)

    if not extracted_text:
        raise HTTPException(status_code=400, detail="Could not extract text from file")

    analysis = run_analysis(extracted_text)
    logger.info(f"Analysis completed for: {file.filename}")
    return analysis


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
