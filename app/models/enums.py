from enum import Enum

class UserRole(str, Enum):
    admin = "admin"
    viewer = "viewer"

class AssetType(str, Enum):
    startup = "Startup"
    crypto_fund = "Crypto Fund"
    farmland = "Farmland"
    collectible = "Collectible"
    other = "Other"
