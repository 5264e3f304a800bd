# In-memory, per-process state behind the API: the knowledge-base document
# list, chat sessions and tasks. Nothing here survives a restart.

from __future__ import annotations

import threading
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Dict, List, Optional

from bizpilot.generate.modes import AssistantMode
from bizpilot.generate.types import Message
from bizpilot.knowledge.types import DocumentType

TASK_STATUSES = ("pending", "in-progress", "completed")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class KnowledgeDocument:
    id: str
    name: str
    url: str
    type: DocumentType
    status: str = "ready"
    upload_date: datetime = field(default_factory=_now)


@dataclass
class ChatSession:
    id: str
    mode: AssistantMode
    messages: List[Message] = field(default_factory=list)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    def append(self, role: str, content: str) -> Message:
        msg = Message(role=role, content=content)
        self.messages.append(msg)
        self.updated_at = _now()
        return msg

    def transcript(self) -> List[Message]:
        """A copy of the turns, safe to hand to the orchestrator."""
        return [Message(role=m.role, content=m.content) for m in self.messages]


@dataclass
class Task:
    id: str
    title: str
    deadline: date
    status: str = "pending"
    ai_recommendation: Optional[str] = None


class DocumentStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._docs: Dict[str, KnowledgeDocument] = {}

    def add(self, doc: KnowledgeDocument) -> KnowledgeDocument:
        with self._lock:
            if not doc.id or doc.id in self._docs:
                doc.id = _new_id()
            self._docs[doc.id] = doc
        return doc

    def list(self) -> List[KnowledgeDocument]:
        with self._lock:
            return list(self._docs.values())

    def remove(self, doc_id: str) -> bool:
        with self._lock:
            return self._docs.pop(doc_id, None) is not None


class SessionStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._sessions: Dict[str, ChatSession] = {}

    def start(self, mode: AssistantMode) -> ChatSession:
        """New conversation in `mode`, opened by the mode's welcome message."""
        mode = AssistantMode(mode)
        session = ChatSession(id=_new_id(), mode=mode)
        session.append("assistant", mode.profile.welcome_message)
        with self._lock:
            self._sessions[session.id] = session
        return session

    def get(self, session_id: str) -> Optional[ChatSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def remove(self, session_id: str) -> bool:
        with self._lock:
            return self._sessions.pop(session_id, None) is not None


class TaskStore:
    def __init__(self, seed: bool = True):
        self._lock = threading.Lock()
        self._tasks: Dict[str, Task] = {}
        if seed:
            for t in _seed_tasks():
                self._tasks[t.id] = t

    def add(self, title: str, deadline: date, status: str = "pending", ai_recommendation: Optional[str] = None) -> Task:
        if status not in TASK_STATUSES:
            raise ValueError(f"Unknown task status: {status}")
        task = Task(id=_new_id(), title=title, deadline=deadline, status=status, ai_recommendation=ai_recommendation)
        with self._lock:
            self._tasks[task.id] = task
        return task

    def list(self) -> List[Task]:
        with self._lock:
            return list(self._tasks.values())

    def set_status(self, task_id: str, status: str) -> Optional[Task]:
        if status not in TASK_STATUSES:
            raise ValueError(f"Unknown task status: {status}")
        with self._lock:
            task = self._tasks.get(task_id)
            if task is not None:
                task.status = status
            return task

    def remove(self, task_id: str) -> bool:
        with self._lock:
            return self._tasks.pop(task_id, None) is not None


def _seed_tasks() -> List[Task]:
    return [
        Task(
            id="1",
            title="Review Q1 Performance",
            deadline=date(2024, 3, 20),
            status="in-progress",
            ai_recommendation="Consider focusing on top-performing products based on recent market analysis.",
        ),
        Task(
            id="2",
            title="Update Marketing Strategy",
            deadline=date(2024, 3, 25),
            status="pending",
            ai_recommendation="Social media engagement shows potential for expansion in Platform X.",
        ),
    ]
