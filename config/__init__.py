import os

# Bí danh APP_ENV -> module cấu hình tương ứng
_ENV_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
    "dev": "development",
    "development": "development",
}


def get_settings_module() -> str:
    # Lấy giá trị môi trường từ biến APP_ENV, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").strip().lower()

    # Giá trị không nhận diện được thì dùng cấu hình Development
    return f"config.{_ENV_ALIASES.get(env, 'development')}"
