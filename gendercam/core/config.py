from pydantic_settings import BaseSettings
from pydantic import BaseModel, ConfigDict, field_validator
from typing import List, Tuple

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class HeuristicConfig(BaseModel):
    """
    Thresholds for the pixel-scan face locator and rule-based gender scoring.

    The classifier thresholds and weights are folk heuristics with no
    statistical grounding. Do not tune them; they are not a model
    of real gender signal.
    """
    # Face locator
    window_size: int = 60
    window_step: int = 10
    min_skin_fraction: float = 0.3
    min_aspect_ratio: float = 0.7
    max_aspect_ratio: float = 1.3
    min_variance: float = 100.0

    # Skin-color rule
    skin_min_red: int = 95
    skin_min_green: int = 40
    skin_min_blue: int = 20
    skin_min_red_green_gap: int = 15

    # Feature scorer
    edge_threshold: float = 30.0

    # Classifier
    base_score: float = 0.5
    brightness_threshold: float = 120.0
    brightness_weight: float = 0.1
    variance_threshold: float = 200.0
    variance_weight: float = 0.15
    edge_density_threshold: float = 0.3
    edge_density_weight: float = 0.2
    skin_ratio_threshold: float = 0.1
    skin_ratio_weight: float = 0.1

    labels: Tuple[str, str] = ("Male", "Female")

    model_config = ConfigDict(frozen=True)


class DnnConfig(BaseModel):
    """Paths and preprocessing constants for the Haar cascade + Caffe gender net"""
    face_cascade_path: str = "assets/haarcascade_frontalface_default.xml"
    gender_proto: str = "models/deploy_gender.prototxt"
    gender_model: str = "models/gender_net.caffemodel"

    input_size: Tuple[int, int] = (227, 227)
    mean_values: Tuple[float, float, float] = (78.4263, 87.7689, 114.8958)
    scale_factor: float = 1.1
    min_neighbors: int = 3

    labels: Tuple[str, str] = ("Male", "Female")

    model_config = ConfigDict(frozen=True)


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Analyzer selection: "heuristic" or "dnn"
    analyzer: str = "heuristic"

    # Camera index or stream URL
    camera_source: str = "0"

    # DNN model files
    face_cascade_path: str = "assets/haarcascade_frontalface_default.xml"
    gender_proto: str = "models/deploy_gender.prototxt"
    gender_model: str = "models/gender_net.caffemodel"
    gender_labels: List[str] = ["Male", "Female"]

    # Display
    window_name: str = "Gender Detection"

    # Snapshots
    save_dir: str = "."
    save_prefix: str = "captured_"
    save_extension: str = ".jpg"

    # Synthetic test pattern
    synthetic_width: int = 640
    synthetic_height: int = 480

    class Config:
        env_file = ".env"
        env_prefix = "GENDERCAM_"
        case_sensitive = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator("analyzer")
    @classmethod
    def validate_analyzer(cls, value: str) -> str:
        value = value.lower()
        if value not in ("heuristic", "dnn"):
            raise ValueError(f"Unknown analyzer: {value}")
        return value

    @field_validator("gender_labels")
    @classmethod
    def validate_labels(cls, value: List[str]) -> List[str]:
        if len(value) != 2:
            raise ValueError("gender_labels must contain exactly two labels")
        return value

    def heuristic_config(self) -> HeuristicConfig:
        return HeuristicConfig(labels=tuple(self.gender_labels))

    def dnn_config(self) -> DnnConfig:
        return DnnConfig(
            face_cascade_path=self.face_cascade_path,
            gender_proto=self.gender_proto,
            gender_model=self.gender_model,
            labels=tuple(self.gender_labels),
        )
