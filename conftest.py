import os

# Keep tests off any real database configured in .env
os.environ.setdefault("DATABASE_URL", "sqlite://")
