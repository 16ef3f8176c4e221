"""
Configuration Module

This module manages application configuration settings and environment
variables for the storage and ledger services.

Features:
- Environment loading
- Storage credentials
- Ledger endpoint and transport mode
- Submission limits
- CORS origins

Dependencies:
- os for env
- dotenv for loading

Author: Photo Intake Development Team
"""

import os
from dotenv import load_dotenv

from app.shared.models import LedgerMode

load_dotenv()

# Cloudinary Configuration
# The upload preset is a public, unsigned token
CLOUDINARY_CLOUD_NAME = os.getenv('CLOUDINARY_CLOUD_NAME', 'dan8sipgs')
CLOUDINARY_UPLOAD_PRESET = os.getenv('CLOUDINARY_UPLOAD_PRESET', 'rosayclavel2025ventanilla')
CLOUDINARY_API_BASE = os.getenv('CLOUDINARY_API_BASE', 'https://api.cloudinary.com')

# Ledger (spreadsheet-backed script) Configuration
LEDGER_URL = os.getenv(
    'LEDGER_URL',
    'https://script.google.com/macros/s/AKfycbyMe0ZhMBNFyRMKMerZzT9_JRkP8fJ2ok1b69jLnth2047gnZSzWk82Xskxp__uSRRa_A/exec'
)
LEDGER_MODE = LedgerMode(os.getenv('LEDGER_MODE', LedgerMode.VERIFIED.value))

# Submission limits
MAX_PHOTOS = int(os.getenv('MAX_PHOTOS', '5'))
MAX_PHOTO_BYTES = int(os.getenv('MAX_PHOTO_BYTES', str(5 * 1024 * 1024)))

# Server Configuration
CORS_ORIGINS = [origin.strip() for origin in os.getenv('CORS_ORIGINS', '*').split(',') if origin.strip()]
