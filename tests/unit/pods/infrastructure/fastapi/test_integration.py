"""Unit tests for the FastAPI integration helpers."""

import pytest

pytest.importorskip("fastapi")

from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI

from pods import Pod
from pods.domain import UndefinedModule
from pods.infrastructure.fastapi_integration.integration import (
    PodMiddleware,
    create_fastapi_dependency,
    create_request_dependency,
)


class TestCreateFastAPIDependency:
    """Test cases for create_fastapi_dependency."""

    def test_dependency_requires_module(self):
        """Test that the dependency returns the module export."""
        pod = Pod()
        pod.declare("settings", {"debug": True})

        dependency = create_fastapi_dependency(pod, "settings")

        assert dependency() == {"debug": True}

    def test_dependency_is_lazy(self):
        """Test that the module is not built until the dependency is called."""
        pod = Pod()
        calls = []
        pod.define("service", lambda: calls.append(1) or "service")

        dependency = create_fastapi_dependency(pod, "service")
        assert calls == []

        dependency()
        dependency()
        assert len(calls) == 1

    def test_dependency_propagates_undefined_module(self):
        """Test that an undefined module surfaces when the dependency is called."""
        dependency = create_fastapi_dependency(Pod(), "missing")

        with pytest.raises(UndefinedModule):
            dependency()


class TestCreateRequestDependency:
    """Test cases for create_request_dependency."""

    def test_request_dependency_uses_request_pod(self):
        """Test that the module is required from request.state.pod."""
        pod = Pod()
        pod.declare("greeting", "hello")
        request = MagicMock()
        request.state.pod = pod

        dependency = create_request_dependency("greeting")

        assert dependency(request) == "hello"

    def test_request_dependency_without_middleware_raises(self):
        """Test that a missing pod raises RuntimeError."""
        request = MagicMock()
        request.state = object()

        dependency = create_request_dependency("greeting")

        with pytest.raises(RuntimeError, match="PodMiddleware"):
            dependency(request)


class TestPodMiddleware:
    """Test cases for PodMiddleware."""

    def test_middleware_stores_pod(self):
        """Test that the middleware keeps a reference to the pod."""
        pod = Pod()
        middleware = PodMiddleware(FastAPI(), pod=pod)
        assert middleware.pod is pod

    @pytest.mark.asyncio
    async def test_dispatch_attaches_pod(self):
        """Test that dispatch sets request.state.pod before calling the endpoint."""
        pod = Pod()
        middleware = PodMiddleware(FastAPI(), pod=pod)
        request = MagicMock()
        response = MagicMock()
        call_next = AsyncMock(return_value=response)

        result = await middleware.dispatch(request, call_next)

        assert request.state.pod is pod
        call_next.assert_awaited_once_with(request)
        assert result is response
