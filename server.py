# server.py (repo root)
from app.main import app

# Optional local run:
if __name__ == "__main__":
    import os, uvicorn
    from app.config import config
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "8080")), log_level=config.log_level.lower())
