"""
CV Chat Backend.

Core components:
- utils.markdown_parser: markdown CV -> structured profile
- db: profile store and chat history
- agents: CV assistant (chat completion with local fallback)
- api: FastAPI app
"""
