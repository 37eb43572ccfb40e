import argparse
import uvicorn


def parse_args():
    parser = argparse.ArgumentParser(description="Run the inventory service")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    try:
        uvicorn.run(
            "inventory_service.app.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
    except KeyboardInterrupt:
        print("\nShutting down server...")
