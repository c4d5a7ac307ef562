from backend.api import start_server

if __name__ == "__main__":
    # Start the backend server in the main thread
    # Set BACKEND_SERVER_DEV_MODE=true (and BACKEND_SERVER_RELOAD=true) for hot-reloading
    start_server()
