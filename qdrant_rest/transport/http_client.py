from abc import ABC, abstractmethod


class HttpClient(ABC):
    @abstractmethod
    def request(self, method, path, data=None):
        """
        Perform one HTTP round trip against the Qdrant API and return the decoded JSON body as a dict.
        Raises NetworkError, SerializationError or HttpError on failure.
        """
        pass
