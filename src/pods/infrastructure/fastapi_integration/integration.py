from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from pods.domain import IRegistry


def create_fastapi_dependency(pod: IRegistry, module_id: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that requires a module from a pod.

    The module is built on the first request that needs it and memoized by
    the pod afterwards.

    Args:
        pod: The pod to require the module from.
        module_id: Identifier of the module.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> pod = Pod()
        >>> pod.define("repository", ["db"], lambda db: UserRepository(db))
        >>>
        >>> get_repository = create_fastapi_dependency(pod, "repository")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_repository)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Require the module from the pod."""
        return pod.require(module_id)

    return dependency


def create_request_dependency(module_id: str) -> Callable[[Request], Any]:
    """Create a FastAPI dependency that requires a module from the request's pod.

    Requires the PodMiddleware to be installed.

    Args:
        module_id: Identifier of the module.

    Returns:
        A callable that requires the module from ``request.state.pod``.

    Example:
        >>> app.add_middleware(PodMiddleware, pod=pod)
        >>>
        >>> get_settings = create_request_dependency("settings")
        >>>
        >>> @app.get("/settings")
        >>> async def read_settings(settings: dict = Depends(get_settings)):
        ...     return settings
    """

    def request_dependency(request: Request) -> Any:
        """Require from the pod attached to the request."""
        if not hasattr(request.state, "pod"):
            raise RuntimeError("Request does not have a pod attached. Did you forget to add PodMiddleware?")
        pod: IRegistry = request.state.pod
        return pod.require(module_id)

    return request_dependency


class PodMiddleware(BaseHTTPMiddleware):
    """Middleware that attaches a pod to each request.

    The pod is accessible via `request.state.pod`.

    Attributes:
        pod: The pod attached to every request.

    Example:
        >>> app = FastAPI()
        >>> app.add_middleware(PodMiddleware, pod=pod)
        >>>
        >>> @app.get("/")
        >>> async def root(request: Request):
        ...     return {"version": request.state.pod.require("version")}
    """

    def __init__(self, app: FastAPI, pod: IRegistry):
        """Initialize the middleware with the pod to attach.

        Args:
            app: The FastAPI/Starlette application.
            pod: The pod to attach to each request.
        """
        super().__init__(app)
        self.pod = pod

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Attach the pod to the request and execute the endpoint.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            The response from the endpoint.
        """
        request.state.pod = self.pod
        return await call_next(request)
