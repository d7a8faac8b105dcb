"""
Blog Pessoal entry point.

Run with:
    python main.py

Or with uvicorn:
    uvicorn main:app --reload

Settings come from BLOG_* environment variables or .env
"""

from blogpessoal.app import create_app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    from blogpessoal.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
