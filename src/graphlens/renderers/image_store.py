# src/graphlens/renderers/image_store.py
"""
以 Pillow 進行點陣圖的解碼與寫檔。
"""

# 1. 標準庫導入
import io
import logging
from pathlib import Path

# 2. 第三方庫導入
from PIL import Image, UnidentifiedImageError

# 3. 本專案導入
from graphlens.errors import DecodeError, UnsupportedFormatError

DEFAULT_IMAGE_FORMAT = "png"


def decode(data: bytes) -> Image.Image:
    """
    將原始位元組解碼為記憶體中的圖片。

    Raises:
        DecodeError: 位元組為空、不是可辨識的點陣圖格式，或像素數超過 Pillow 的解壓縮炸彈上限。
    """
    if not data:
        raise DecodeError("沒有可解碼的圖片資料 (輸出為空)。")
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except Image.DecompressionBombError as e:
        raise DecodeError(f"圖片像素數超過 Pillow 的上限，請降低 dpi 或縮小圖: {e}") from e
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        raise DecodeError(f"無法將 {len(data)} 位元組解碼為圖片: {e}") from e
    return image


def write(image: Image.Image, path: str | Path, image_format: str = DEFAULT_IMAGE_FORMAT) -> None:
    """
    以指定格式將圖片寫入 `path`，既有檔案會被覆寫。

    Raises:
        UnsupportedFormatError: Pillow 不支援寫出此格式。
        OSError: 路徑無法寫入 (例如目錄不存在或沒有權限)。
    """
    pil_format = image_format.upper()
    if pil_format == "JPG":
        pil_format = "JPEG"

    Image.init()
    if pil_format not in Image.SAVE:
        raise UnsupportedFormatError(f"不支援的圖片格式: {image_format}")

    image.save(path, format=pil_format)
    logging.info(f"圖片已儲存至: {path} ({pil_format}, {image.width}x{image.height})")
