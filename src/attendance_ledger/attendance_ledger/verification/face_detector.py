from __future__ import annotations

import base64

import cv2
import face_recognition
import numpy as np


def decode_image(photo: bytes):
    """Decode JPEG/PNG bytes (or a base64 data URL) into a contiguous RGB array."""
    if photo[:5] == b"data:":
        photo = base64.b64decode(photo.split(b",", 1)[1])

    img = cv2.imdecode(np.frombuffer(photo, np.uint8), cv2.IMREAD_UNCHANGED)
    if img is None:
        return None

    if len(img.shape) == 3 and img.shape[2] == 4:
        img = cv2.cvtColor(img, cv2.COLOR_BGRA2BGR)
    elif len(img.shape) == 2:
        img = cv2.cvtColor(img, cv2.COLOR_GRAY2BGR)

    rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
    return np.ascontiguousarray(rgb, dtype=np.uint8)


class FaceDetectionVerifier:
    """Accepts a photo when ``face_recognition`` locates at least one face."""

    def __init__(self, *, model: str = "hog"):
        self._model = model

    def verify(self, photo: bytes) -> bool:
        if not photo:
            return False
        rgb = decode_image(photo)
        if rgb is None:
            return False
        return len(face_recognition.face_locations(rgb, model=self._model)) > 0
