"""Invocation strategies. Each module exposes run(request, ...) -> InvocationResult."""
