# bizpilot: knowledge base + RAG-augmented assistant service.

__version__ = "0.1.0"
