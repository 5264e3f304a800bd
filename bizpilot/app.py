# ============================================================
# Bizpilot FastAPI App
# ------------------------------------------------------------
# This app wires everything together:
#   - Knowledge base: validate + ingest document URLs
#   - Chat: RAG-augmented replies in two assistant modes
#   - Tasks with AI recommendations
#   - OpenAI client, or Echo client when no key is configured
# All state is in-memory and per-process.
# ============================================================

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Literal, Optional

from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel, Field

# --- Local imports ---
from bizpilot.settings import settings
from bizpilot.logging_setup import configure_logging
from bizpilot.knowledge import (
    DocumentType,
    IngestClient,
    RagRetriever,
    RetrievalError,
    file_name_from_url,
    is_valid_document_url,
)
from bizpilot.generate import AssistantMode, ChatGenerator, EchoDevClient, GenerationError, Message
from bizpilot.state import ChatSession, DocumentStore, KnowledgeDocument, SessionStore, Task, TaskStore

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# ------------------------------------------------------------
# 🔧 Client selection
# ------------------------------------------------------------
if settings.OPENAI_API_KEY:
    from bizpilot.generate.clients.openai_client import OpenAIClient
    model_client = OpenAIClient(model=settings.OPENAI_MODEL, api_key=settings.OPENAI_API_KEY)
else:
    logger.warning("OPENAI_API_KEY not set; using echo client")
    model_client = EchoDevClient()

retriever = RagRetriever(base_url=settings.RAG_API_BASE_URL)
ingest_client = IngestClient(base_url=settings.RAG_API_BASE_URL, timeout=settings.INGEST_TIMEOUT)
chat_gen = ChatGenerator(model_client=model_client, retriever=retriever)

documents = DocumentStore()
sessions = SessionStore()
tasks = TaskStore()

MSG_EMPTY_URL = "Please enter a document URL"
MSG_INVALID_URL = "Invalid document URL. Please provide a direct link to a PDF, DOCX, DOC, or TXT file."

# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
app = FastAPI(title="Bizpilot API", version="0.1")

# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
TaskStatus = Literal["pending", "in-progress", "completed"]


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ModeOut(BaseModel):
    key: AssistantMode
    title: str
    description: str
    dataset: str


class DocumentIn(BaseModel):
    url: str
    type: DocumentType = DocumentType.GENERAL


class DocumentOut(BaseModel):
    id: str
    name: str
    url: str
    type: DocumentType
    status: str
    upload_date: datetime
    message: Optional[str] = None
    ingested_files: Optional[int] = None
    dataset_id: Optional[str] = None


class RetrieveRequest(BaseModel):
    query: str
    mode: AssistantMode = AssistantMode.SUCCESS_MANAGER


class RetrieveResponse(BaseModel):
    query: str
    dataset: str
    fragments: List[str]


class ChatRequest(BaseModel):
    mode: AssistantMode
    messages: List[ChatTurn] = Field(min_length=1)


class ChatPayload(BaseModel):
    text: str
    mode: AssistantMode
    context_used: bool
    meta: Dict[str, Any] = {}


class SessionIn(BaseModel):
    mode: AssistantMode


class SessionOut(BaseModel):
    id: str
    mode: AssistantMode
    messages: List[ChatTurn]
    created_at: datetime
    updated_at: datetime


class SessionMessageIn(BaseModel):
    content: str


class SessionReply(BaseModel):
    reply: str
    context_used: bool
    session: SessionOut


class TaskIn(BaseModel):
    title: str
    deadline: date
    status: TaskStatus = "pending"


class TaskPatch(BaseModel):
    status: TaskStatus


class TaskOut(BaseModel):
    id: str
    title: str
    deadline: date
    status: TaskStatus
    ai_recommendation: Optional[str] = None


def _session_out(s: ChatSession) -> SessionOut:
    return SessionOut(
        id=s.id,
        mode=s.mode,
        messages=[ChatTurn(role=m.role, content=m.content) for m in s.messages],
        created_at=s.created_at,
        updated_at=s.updated_at,
    )


def _task_out(t: Task) -> TaskOut:
    return TaskOut(id=t.id, title=t.title, deadline=t.deadline, status=t.status, ai_recommendation=t.ai_recommendation)


def _doc_out(d: KnowledgeDocument, **extra) -> DocumentOut:
    return DocumentOut(id=d.id, name=d.name, url=d.url, type=d.type, status=d.status, upload_date=d.upload_date, **extra)


def _get_session(session_id: str) -> ChatSession:
    s = sessions.get(session_id)
    if s is None:
        raise HTTPException(status_code=404, detail="Chat session not found")
    return s

# ------------------------------------------------------------
# 🧭 Modes
# ------------------------------------------------------------
@app.get("/modes", response_model=List[ModeOut])
def list_modes():
    return [
        ModeOut(key=m, title=m.profile.title, description=m.profile.description, dataset=m.dataset.value)
        for m in AssistantMode
    ]

# ------------------------------------------------------------
# 📚 Knowledge base
# ------------------------------------------------------------
@app.post("/documents", response_model=DocumentOut, status_code=201)
def add_document(req: DocumentIn):
    url = req.url.strip()
    if not url:
        raise HTTPException(status_code=422, detail=MSG_EMPTY_URL)
    if not is_valid_document_url(url):
        raise HTTPException(status_code=422, detail=MSG_INVALID_URL)

    result = ingest_client.ingest(url, req.type)
    if not result.success:
        raise HTTPException(status_code=502, detail=result.message)

    doc = documents.add(
        KnowledgeDocument(
            id=str(result.document_id or ""),
            name=file_name_from_url(url),
            url=url,
            type=req.type,
        )
    )
    return _doc_out(doc, message=result.message, ingested_files=result.ingested_files, dataset_id=result.dataset_id)


@app.get("/documents", response_model=List[DocumentOut])
def list_documents():
    return [_doc_out(d) for d in documents.list()]


@app.delete("/documents/{doc_id}", status_code=204)
def remove_document(doc_id: str):
    if not documents.remove(doc_id):
        raise HTTPException(status_code=404, detail="Document not found")
    return Response(status_code=204)

# ------------------------------------------------------------
# 🔎 Retrieval-only route
# ------------------------------------------------------------
@app.post("/retrieve", response_model=RetrieveResponse)
def retrieve_endpoint(req: RetrieveRequest):
    try:
        fragments = retriever.retrieve(req.query, req.mode)
    except RetrievalError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return RetrieveResponse(query=req.query, dataset=req.mode.dataset.value, fragments=[f.chunk for f in fragments])

# ------------------------------------------------------------
# 💬 Chat
# ------------------------------------------------------------
@app.post("/chat", response_model=ChatPayload)
def chat(req: ChatRequest):
    transcript = [Message(role=t.role, content=t.content) for t in req.messages]
    try:
        out = chat_gen.chat(transcript, req.mode)
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return ChatPayload(text=out.text, mode=req.mode, context_used=out.context_used, meta=out.meta or {})


@app.post("/chat/sessions", response_model=SessionOut, status_code=201)
def start_session(req: SessionIn):
    return _session_out(sessions.start(req.mode))


@app.get("/chat/sessions/{session_id}", response_model=SessionOut)
def get_session(session_id: str):
    return _session_out(_get_session(session_id))


@app.delete("/chat/sessions/{session_id}", status_code=204)
def end_session(session_id: str):
    if not sessions.remove(session_id):
        raise HTTPException(status_code=404, detail="Chat session not found")
    return Response(status_code=204)


@app.post("/chat/sessions/{session_id}/messages", response_model=SessionReply)
def send_message(session_id: str, req: SessionMessageIn):
    session = _get_session(session_id)
    content = req.content.strip()
    if not content:
        raise HTTPException(status_code=422, detail="Message must not be empty")

    # the user's turn stays in the transcript even if the reply fails
    session.append("user", content)
    try:
        out = chat_gen.chat(session.transcript(), session.mode)
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
    session.append("assistant", out.text)
    return SessionReply(reply=out.text, context_used=out.context_used, session=_session_out(session))

# ------------------------------------------------------------
# ✅ Tasks
# ------------------------------------------------------------
@app.get("/tasks", response_model=List[TaskOut])
def list_tasks():
    return [_task_out(t) for t in tasks.list()]


@app.post("/tasks", response_model=TaskOut, status_code=201)
def add_task(req: TaskIn):
    title = req.title.strip()
    if not title:
        raise HTTPException(status_code=422, detail="Task title must not be empty")
    recommendation = chat_gen.recommend_task(title, req.deadline)
    return _task_out(tasks.add(title, req.deadline, req.status, ai_recommendation=recommendation))


@app.patch("/tasks/{task_id}", response_model=TaskOut)
def update_task(task_id: str, req: TaskPatch):
    task = tasks.set_status(task_id, req.status)
    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")
    return _task_out(task)


@app.delete("/tasks/{task_id}", status_code=204)
def remove_task(task_id: str):
    if not tasks.remove(task_id):
        raise HTTPException(status_code=404, detail="Task not found")
    return Response(status_code=204)

# ------------------------------------------------------------
# 🧭 Health checks
# ------------------------------------------------------------
@app.get("/healthz")
def healthz():
    return {
        "ok": True,
        "env": settings.ENV,
        "debug": settings.DEBUG,
        "app": settings.app_name,
        "engine": type(model_client).__name__,
    }


@app.get("/health")
def health():
    return {"status": "ok", "env": settings.ENV}


@app.get("/")
def hello():
    return {"message": "Bizpilot service running."}
