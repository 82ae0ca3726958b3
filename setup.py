# setup.py
from setuptools import find_packages, setup

setup(
    name="users-app",
    version="0.1.0",
    packages=find_packages(include=["users_app", "users_app.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110",
        "starlette",
        "anyio>=4",
        "uvicorn>=0.29",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "sqlalchemy[asyncio]>=2.0",
        "asyncpg>=0.29",
        "alembic>=1.13",
        "structlog>=24.1",
        "sentry-sdk>=1.40",
    ],
    extras_require={
        "test": [
            "pytest>=8",
            "pytest-asyncio>=0.23",
            "httpx>=0.27",
            "python-dotenv>=1.0",
        ],
    },
    entry_points={"console_scripts": ["users-app=users_app.__main__:main"]},
)
