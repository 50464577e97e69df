"""Course Portal: minimal templated HTML site packaged for a GitOps pipeline."""

__version__ = "0.1.0"
