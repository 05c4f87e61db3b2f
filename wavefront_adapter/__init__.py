"""Client for querying Wavefront metrics on behalf of the Kubernetes metrics adapter"""
