"""
Attaching request context to error reports.

Demonstrates:
- Building a context provider inside an exception handler
- Resolving the current user from application state
- Controlling reported user data with a to_flare() method
- Injecting the provider as a FastAPI dependency
"""

from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from fastapi_error_context import RequestContextProvider, context_dependency

app = FastAPI(title="Error Context Example")


class User:
    def __init__(self, user_id: int, email: str, password_hash: str):
        self.id = user_id
        self.email = email
        self.password_hash = password_hash

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "email": self.email, "password_hash": self.password_hash}

    def to_flare(self) -> dict[str, Any]:
        """Only report the id; to_dict() would leak the password hash."""
        return {"id": self.id}


USERS = {"valid-token": User(1, "user@example.com", "$2b$12$...")}


def current_user(request: Request) -> User | None:
    """Resolve the user from the Authorization header (replace with real auth)."""
    token = request.headers.get("Authorization", "").removeprefix("Bearer ")
    return USERS.get(token)


class OrderError(Exception):
    pass


@app.exception_handler(OrderError)
async def report_order_error(request: Request, exc: OrderError) -> JSONResponse:
    context = RequestContextProvider.from_request(request, user_resolver=current_user)
    # In production, ship this to your error tracker
    print(f"[ERROR] {exc!r} context={context.to_dict()}")
    return JSONResponse({"detail": "Order processing failed"}, status_code=500)


@app.get("/orders/{order_id}", name="orders.show")
async def show_order(order_id: int):
    """Always fails, to exercise the exception handler."""
    raise OrderError(f"order {order_id} is corrupt")


@app.get("/debug/context")
async def debug_context(
    context: RequestContextProvider = Depends(context_dependency(user_resolver=current_user)),
):
    """Return the context an error report would carry for this request."""
    return context.to_dict()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl -H "Authorization: Bearer valid-token" http://localhost:8000/orders/17
    # curl -H "Authorization: Bearer valid-token" http://localhost:8000/debug/context
