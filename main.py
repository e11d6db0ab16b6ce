import logging

from fastapi import FastAPI

from app.common.exceptions import PlacesError
from app.core.exception_handlers import global_exception_handler, places_exception_handler
from app.routes.place_router import router as place_router
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s - %(message)s")

app = FastAPI()

origins = [
    "http://localhost:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(PlacesError, places_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.include_router(place_router)
