from playerkit.api.main import app

if __name__ == "__main__":
    import os
    import uvicorn
    host = os.getenv("PLAYERKIT_HOST", "0.0.0.0")
    port = int(os.getenv("PLAYERKIT_PORT", "8001"))
    uvicorn.run(app, host=host, port=port)
