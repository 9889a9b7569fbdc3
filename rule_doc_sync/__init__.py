"""Rule documentation sync package

This package automatically loads environment variables from a ``.env``
file in the working directory if present. API keys such as
``OPENAI_API_KEY`` and ``GEMINI_API_KEY`` and the ``CORE_REPO_PATH`` of the
rule implementation checkout can therefore be placed in that file.
"""

from pathlib import Path

from dotenv import load_dotenv

env_file = Path.cwd() / ".env"
if env_file.exists():
    load_dotenv(dotenv_path=env_file)
