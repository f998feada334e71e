"""Browser-driven login workflow: framework, page objects and scenarios."""
