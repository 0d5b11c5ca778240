class BaseNormalizer:
    @classmethod
    def normalize(cls, data, *args, **kwargs):
        raise NotImplementedError("Implement in subclass")
