import os
import traceback

from src.core.config import get_id_server_url


def main():
    print("=== BOOT CHECK ===")
    print("PYTHONPATH:", os.getcwd())
    print("ENVIRONMENT:", os.getenv("ENVIRONMENT"))
    print("ADMIN_API_KEY set:", bool(os.getenv("ADMIN_API_KEY")))
    print("ADMIN_CALLER_INTERVAL_SECONDS:", os.getenv("ADMIN_CALLER_INTERVAL_SECONDS"))
    print("id-server:", get_id_server_url(os.getenv("ENVIRONMENT")))

    try:
        print("\n--- Trying to import src.core.services.run_admin_caller ---")
        from src.core.services.run_admin_caller import main as entrypoint
        print("✅ Imported src.core.services.run_admin_caller:main OK", entrypoint.__name__)
    except Exception:
        print("❌ Import failed:")
        traceback.print_exc()
        raise


if __name__ == "__main__":
    main()
