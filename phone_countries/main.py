from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from .iso import DEFAULT_ISO_CODE
from .routes import country_code

# Create FastAPI app
app = FastAPI(
    title="Phone Countries API",
    description="Country metadata for phone number inputs",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, replace with specific origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(country_code.router)


@app.get("/")
def read_root():
    """Root endpoint"""
    return {
        "message": "Welcome to Phone Countries API",
        "docs": "/docs",
        "default_country": DEFAULT_ISO_CODE,
        "health": "OK"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
