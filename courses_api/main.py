import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from courses_api.core import config
from courses_api.database import Database
from courses_api.errors import register_exception_handlers
from courses_api.routes import course_routes, user_routes

logger = logging.getLogger(__name__)


def create_app(database_url: str | None = None) -> FastAPI:
    config.validate_runtime_config()
    logging.basicConfig(level=config.LOG_LEVEL)

    database = Database(database_url or config.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            database.create_schema()
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check DATABASE_URL.')
            raise
        try:
            yield
        finally:
            database.dispose()

    app = FastAPI(title='Courses REST API', debug=config.DEBUG, lifespan=lifespan)
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )
    register_exception_handlers(app)

    @app.get('/')
    def root():
        return {'message': 'Welcome to the REST API project!'}

    app.include_router(user_routes.router, prefix='/api')
    app.include_router(course_routes.router, prefix='/api')
    return app


app = create_app()
