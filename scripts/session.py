import asyncio
import getpass

from userhub.client import AuthError, build_client
from userhub.core.logging import configure_logging


async def main() -> None:
    configure_logging("WARNING")
    client = build_client()
    store = client.auth_store

    try:
        if await store.check_auth():
            print(f"Session already authorised for {store.user_email}.")
            return

        action = input("Log in (l) or register (r)? ").strip().lower()
        email = input("Email: ").strip()
        password = getpass.getpass("Password: ").strip()

        try:
            if action == "r":
                name = input("Name: ").strip()
                await store.register(name, email, password)
            else:
                await store.login(email, password)
        except AuthError as exc:
            print("Authentication failed:", exc.message)
            return

        print(f"Authenticated as {store.user_name}. Token saved to", client.settings.token_storage_path)
    finally:
        await client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
