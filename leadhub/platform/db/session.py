from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine


def create_engine_for(database_url: str) -> AsyncEngine:
    options = {"future": True, "pool_pre_ping": True}
    # SQLite (aiosqlite) does not take the pool sizing arguments
    if not database_url.startswith("sqlite"):
        options.update(
            pool_recycle=1800,
            pool_size=20,
            max_overflow=30,  # (burst capacity)
            pool_timeout=30,
        )
    return create_async_engine(database_url, echo=False, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
