"""Default profiles for MIDI Mixer."""

from midi_mixer.constants import DEFAULT_CONTROLLER_NAME
from midi_mixer.config.types import ProfileDict

# Used when no configuration file is found or the file cannot be read.
# Nothing is bound, so the mixer connects but never acts.
MINIMAL_PROFILE: ProfileDict = {
    "midi_controller_name": DEFAULT_CONTROLLER_NAME,
    "controls": {"buttons": {}, "faders": {}},
    "groups": {},
    "mapping": {},
}

# Written by ``init-config``: two channel strips on a typical 8-fader surface
EXAMPLE_PROFILE: ProfileDict = {
    "midi_controller_name": "nanoKONTROL2",
    "controls": {
        "buttons": {
            "mute_1": {"control": 48, "channel": 0, "trigger": 127},
            "mute_2": {"control": 49, "channel": 0, "trigger": 127},
        },
        "faders": {
            "fader_1": {"channel": 0, "control": 0, "min": 0, "max": 127},
            "fader_2": {"channel": 0, "control": 1, "min": 0, "max": 127},
        },
    },
    "groups": {
        "browser": {"volume_control": ["fader_1"], "mute": ["mute_1"]},
        "speakers": {"volume_control": ["fader_2"], "mute": ["mute_2"]},
    },
    "mapping": {
        "browser": "firefox",
        "speakers": "Built-in Audio Analog Stereo",
    },
}
