"""Game configuration module - centralized storage for all game parameters."""

import json

RELATIVE_RULE = "relative"
ABSOLUTE_RULE = "absolute"
COLOR_RULES = (RELATIVE_RULE, ABSOLUTE_RULE)

DELTA_TRIGGER = "delta"
SATURATION_TRIGGER = "saturation"
TRIGGER_POLICIES = (DELTA_TRIGGER, SATURATION_TRIGGER)

BASELINE_FIRST_NONZERO = "first_nonzero"
BASELINE_FIRST = "first"
BASELINE_MODES = (BASELINE_FIRST_NONZERO, BASELINE_FIRST)

# Red-pixel counts at which the strike zone is considered saturated.
SATURATION_THRESHOLDS = {
    RELATIVE_RULE: 6200,
    ABSOLUTE_RULE: 5500,
}


class GameConfig:
    """
    Centralized configuration for all game parameters.

    Contains the fixed game geometry, the sampling cadence of the tracking
    loop, and the detection policy (color rule and trigger policy).
    """

    def __init__(self, **kwargs):
        """
        Initialize game configuration with optional custom values.

        Args:
            game_width: Width of the game window in pixels (default 400)
            game_height: Height of the game window in pixels (default 720)
            target_radius: Half side of the strike zone watched after a shot (default 80)
            frame_period: Seconds between paced samples (default 0.016, ~60 FPS)
            settle_frames: Periods to wait before the first paced sample (default 10)
            max_samples: Sample budget when paced (default 60)
            unpaced_max_samples: Sample budget when unpaced (default 1000)
            paced: Whether the tracking loop sleeps between samples (default True)
            color_rule: 'relative' or 'absolute' red classification (default 'relative')
            trigger_policy: 'delta' or 'saturation' (default 'delta')
            trigger_delta: Count rise over baseline that signals a hit (default 300)
            saturation_threshold: Count that signals a hit in saturation mode
                (default None, meaning 6200 for relative, 5500 for absolute)
            baseline_mode: 'first_nonzero' or 'first' (default 'first_nonzero')
            aim_length: Magnitude of the aim drag vector (default 125.0)
            focus_delay: Seconds to wait after the focus click (default 0.05)
        """
        # Game geometry
        self.game_width = kwargs.get('game_width', 400)
        self.game_height = kwargs.get('game_height', 720)
        self.target_radius = kwargs.get('target_radius', 80)

        # Sampling cadence
        self.frame_period = kwargs.get('frame_period', 0.016)
        self.settle_frames = kwargs.get('settle_frames', 10)
        self.max_samples = kwargs.get('max_samples', 60)
        self.unpaced_max_samples = kwargs.get('unpaced_max_samples', 1000)
        self.paced = kwargs.get('paced', True)

        # Detection policy
        self.color_rule = kwargs.get('color_rule', RELATIVE_RULE)
        self.trigger_policy = kwargs.get('trigger_policy', DELTA_TRIGGER)
        self.trigger_delta = kwargs.get('trigger_delta', 300)
        self.saturation_threshold = kwargs.get('saturation_threshold', None)
        self.baseline_mode = kwargs.get('baseline_mode', BASELINE_FIRST_NONZERO)

        # Shot geometry and timing
        self.aim_length = kwargs.get('aim_length', 125.0)
        self.focus_delay = kwargs.get('focus_delay', 0.05)

    @classmethod
    def legacy(cls, **kwargs):
        """Configuration reproducing the earliest detection behaviour.

        Absolute color rule, saturation trigger, unpaced sampling.
        """
        settings = {
            'color_rule': ABSOLUTE_RULE,
            'trigger_policy': SATURATION_TRIGGER,
            'paced': False,
        }
        settings.update(kwargs)
        return cls(**settings)

    def effective_saturation_threshold(self):
        """Saturation threshold, falling back to the color rule's default."""
        if self.saturation_threshold is not None:
            return self.saturation_threshold
        return SATURATION_THRESHOLDS[self.color_rule]

    @property
    def target_diameter(self):
        return self.target_radius * 2

    def validate(self):
        """
        Check that all parameters are usable.

        Raises:
            ValueError: if a policy name is unknown or a size is not positive
        """
        if self.color_rule not in COLOR_RULES:
            raise ValueError(f"Unknown color rule '{self.color_rule}', expected one of {COLOR_RULES}")
        if self.trigger_policy not in TRIGGER_POLICIES:
            raise ValueError(f"Unknown trigger policy '{self.trigger_policy}', expected one of {TRIGGER_POLICIES}")
        if self.baseline_mode not in BASELINE_MODES:
            raise ValueError(f"Unknown baseline mode '{self.baseline_mode}', expected one of {BASELINE_MODES}")
        for name in ('game_width', 'game_height', 'target_radius', 'max_samples', 'unpaced_max_samples'):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")
        if self.frame_period < 0 or self.settle_frames < 0:
            raise ValueError("frame_period and settle_frames must not be negative")
        if self.aim_length <= 0:
            raise ValueError(f"aim_length must be positive, got {self.aim_length}")
        return self

    def to_dict(self):
        """
        Convert configuration to dictionary.

        Returns:
            Dictionary of all configuration parameters
        """
        return {
            'game_width': self.game_width,
            'game_height': self.game_height,
            'target_radius': self.target_radius,
            'frame_period': self.frame_period,
            'settle_frames': self.settle_frames,
            'max_samples': self.max_samples,
            'unpaced_max_samples': self.unpaced_max_samples,
            'paced': self.paced,
            'color_rule': self.color_rule,
            'trigger_policy': self.trigger_policy,
            'trigger_delta': self.trigger_delta,
            'saturation_threshold': self.saturation_threshold,
            'baseline_mode': self.baseline_mode,
            'aim_length': self.aim_length,
            'focus_delay': self.focus_delay,
        }


def load_game_config(path):
    """
    Load configuration overrides from a JSON file.

    The file holds a single JSON object; any key of GameConfig may appear.
    Unknown keys are rejected so typos do not go unnoticed.

    Args:
        path: Path to the JSON file

    Returns:
        Validated GameConfig
    """
    with open(path, 'r') as f:
        overrides = json.load(f)
    if not isinstance(overrides, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    known = GameConfig().to_dict()
    unknown = sorted(set(overrides) - set(known))
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    return GameConfig(**overrides).validate()


def create_game_config(args):
    """
    Create GameConfig from parsed command line arguments.

    Starts from the config file named by args.config (if any), then applies
    the policy flags given on the command line.

    Args:
        args: argparse namespace with config, unpaced, color_rule and trigger attributes

    Returns:
        Validated GameConfig
    """
    config_path = getattr(args, 'config', None)
    settings = load_game_config(config_path).to_dict() if config_path else {}

    if getattr(args, 'unpaced', False):
        settings['paced'] = False
    if getattr(args, 'color_rule', None):
        settings['color_rule'] = args.color_rule
    if getattr(args, 'trigger', None):
        settings['trigger_policy'] = args.trigger

    return GameConfig(**settings).validate()
