"""Repository features package"""

from blogpessoal.features.base_feature import RepositoryFeature
from blogpessoal.features.timestamp_feature import UpdateTimestampFeature

__all__ = ["RepositoryFeature", "UpdateTimestampFeature"]
