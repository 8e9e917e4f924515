from .sonarqube import NetworkError, SonarQubeClient, SourceUnavailable

__all__ = ["SonarQubeClient", "SourceUnavailable", "NetworkError"]
