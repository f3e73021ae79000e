"""
Input configuration classes for TANKVENT with validation and YAML support.
"""
from dataclasses import dataclass, field, asdict, replace
from enum import Enum
from typing import Optional, Dict, Any, Tuple, Iterable
import json

import yaml

from tankvent.core.constants import (
    INSULATION_CONDUCTIVITY,
    MAX_DESIGN_PRESSURE_KPAG,
    CAPACITY_WARNING_M3,
)
from tankvent.core.exceptions import ConfigurationError


# =============================================================================
# ENUMERATIONS
# =============================================================================

class _LookupEnum(str, Enum):
    """String enum that parses either its value or its member name."""

    @classmethod
    def parse(cls, raw):
        if isinstance(raw, cls):
            return raw
        text = str(raw).strip()
        for member in cls:
            if text == member.value or text.upper() == member.name:
                return member
        raise ValueError(
            f"Invalid {cls.__name__} '{raw}'. "
            f"Valid values: {', '.join(m.value for m in cls)}"
        )


class TankConfiguration(_LookupEnum):
    """Tank construction / fire-protection variant."""
    BARE_METAL = "Bare Metal Tank (No Insulation)"
    INSULATED_FULL = "Insulated tank - Fully Insulation"
    INSULATED_PARTIAL = "Insulated tank - Partial Insulation"
    CONCRETE = "Concrete tank or Fire proofing"
    WATER_APPLICATION = "Water-application facilities"
    DEPRESSURING = "Depressuring and Emptying facilities"
    UNDERGROUND = "Underground Storage"
    EARTH_COVERED = "Earth-covered storage above grade"
    IMPOUNDMENT_AWAY = "Impoundment away from tank"
    IMPOUNDMENT = "Impoundment"

    @property
    def is_insulated(self) -> bool:
        return self in (TankConfiguration.INSULATED_FULL, TankConfiguration.INSULATED_PARTIAL)


class ApiEdition(_LookupEnum):
    """API 2000 edition governing the normal venting rules."""
    FIFTH = "5TH"
    SIXTH = "6TH"
    SEVENTH = "7TH"


class FlashBoilingPointType(_LookupEnum):
    """Whether the fluid classification value is a flash point or a boiling point."""
    FP = "FP"
    BP = "BP"


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: list = field(default_factory=list)
    warnings: list = field(default_factory=list)

    def add_error(self, msg: str):
        self.errors.append(msg)
        self.is_valid = False

    def add_warning(self, msg: str):
        self.warnings.append(msg)


# =============================================================================
# VALUE OBJECTS
# =============================================================================

@dataclass(frozen=True)
class Stream:
    """A liquid stream connected to the tank."""
    stream_no: str
    flowrate: float                     # [m³/h]
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Stream':
        return cls(
            stream_no=str(data.get('stream_no', data.get('id', ''))),
            flowrate=float(data.get('flowrate', 0.0)),
            description=data.get('description'),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = {'stream_no': self.stream_no, 'flowrate': self.flowrate}
        if self.description is not None:
            data['description'] = self.description
        return data


@dataclass(frozen=True)
class Insulation:
    """
    Insulation data for the two insulated tank configurations.

    Attributes:
        thickness_mm: Insulation thickness [mm]
        conductivity: Insulation thermal conductivity [W/(m·K)]
        inside_heat_transfer_coeff: Inside film coefficient U_i [W/(m²·K)]
        insulated_area: Insulated surface area A_inp [m²] (partial insulation only)
        material: Optional material name; fills conductivity when omitted
    """
    thickness_mm: Optional[float] = None
    conductivity: Optional[float] = None
    inside_heat_transfer_coeff: Optional[float] = None
    insulated_area: Optional[float] = None
    material: Optional[str] = None

    def __post_init__(self):
        if self.conductivity is None and self.material:
            key = self.material.strip().lower()
            if key in INSULATION_CONDUCTIVITY:
                object.__setattr__(self, 'conductivity', INSULATION_CONDUCTIVITY[key])

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Insulation':
        return cls(
            thickness_mm=_opt_float(data.get('thickness_mm')),
            conductivity=_opt_float(data.get('conductivity')),
            inside_heat_transfer_coeff=_opt_float(data.get('inside_heat_transfer_coeff')),
            insulated_area=_opt_float(data.get('insulated_area')),
            material=data.get('material'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}


@dataclass(frozen=True)
class FluidProperties:
    """
    Stored fluid properties.

    Latent heat, relieving temperature and molecular mass are optional; any
    that are left as None fall back to the Hexane reference values in the
    emergency venting calculation.
    """
    avg_storage_temp: float = 15.0                  # [°C]
    vapour_pressure: float = 0.0                    # [kPa]
    flash_boiling_point_type: FlashBoilingPointType = FlashBoilingPointType.FP
    flash_boiling_point: Optional[float] = None     # [°C]
    latent_heat: Optional[float] = None             # [kJ/kg]
    relieving_temperature: Optional[float] = None   # [°C]
    molecular_mass: Optional[float] = None          # [g/mol]

    def __post_init__(self):
        object.__setattr__(self, 'flash_boiling_point_type',
                           FlashBoilingPointType.parse(self.flash_boiling_point_type))

    @property
    def uses_hexane_defaults(self) -> bool:
        """True when any of the emergency venting properties is unspecified."""
        return (
            self.latent_heat is None
            or self.relieving_temperature is None
            or self.molecular_mass is None
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FluidProperties':
        return cls(
            avg_storage_temp=float(data.get('avg_storage_temp', 15.0)),
            vapour_pressure=float(data.get('vapour_pressure', 0.0)),
            flash_boiling_point_type=FlashBoilingPointType.parse(
                data.get('flash_boiling_point_type', 'FP')
            ),
            flash_boiling_point=_opt_float(data.get('flash_boiling_point')),
            latent_heat=_opt_float(data.get('latent_heat')),
            relieving_temperature=_opt_float(data.get('relieving_temperature')),
            molecular_mass=_opt_float(data.get('molecular_mass')),
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['flash_boiling_point_type'] = self.flash_boiling_point_type.value
        return data


@dataclass(frozen=True)
class DrainSystem:
    """Drain line feeding the inbreathing check."""
    line_size_mm: float
    max_height_above_drain_mm: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DrainSystem':
        return cls(
            line_size_mm=float(data['line_size_mm']),
            max_height_above_drain_mm=float(data['max_height_above_drain_mm']),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# =============================================================================
# CALCULATION INPUT
# =============================================================================

@dataclass(frozen=True)
class CalculationInput:
    """
    Complete description of one tank venting case.

    Units follow the API 2000 worksheets:
    - Lengths: mm
    - Latitude: degrees
    - Pressures: kPag (design), kPa (vapour)
    - Flowrates: m³/h

    Example:
        case = CalculationInput(
            tank_number="TK-3120",
            diameter=24000.0,
            height=17500.0,
            latitude=12.7,
            design_pressure=101.32,
            outgoing_streams=(Stream("S-1", 368.9),),
            api_edition=ApiEdition.SEVENTH,
        )
    """

    # === IDENTIFICATION ===
    tank_number: str = "TK-001"
    description: Optional[str] = None

    # === TANK GEOMETRY ===
    diameter: float = 10_000.0          # [mm]
    height: float = 10_000.0            # [mm] TL-TL
    latitude: float = 45.0              # [deg]
    design_pressure: float = 5.0        # [kPag]

    # === CONFIGURATION ===
    tank_configuration: TankConfiguration = TankConfiguration.BARE_METAL
    insulation: Optional[Insulation] = None

    # === FLUID ===
    fluid: FluidProperties = field(default_factory=FluidProperties)

    # === STREAMS ===
    # Tank perspective: incoming fills the tank (outbreathing),
    # outgoing empties it (inbreathing).
    incoming_streams: Tuple[Stream, ...] = ()
    outgoing_streams: Tuple[Stream, ...] = ()

    # === DRAIN ===
    drain: Optional[DrainSystem] = None

    # === SETTINGS ===
    api_edition: ApiEdition = ApiEdition.SEVENTH

    def __post_init__(self):
        """Coerce enum strings and stream lists."""
        object.__setattr__(self, 'tank_configuration',
                           TankConfiguration.parse(self.tank_configuration))
        object.__setattr__(self, 'api_edition', ApiEdition.parse(self.api_edition))
        object.__setattr__(self, 'incoming_streams', _stream_tuple(self.incoming_streams))
        object.__setattr__(self, 'outgoing_streams', _stream_tuple(self.outgoing_streams))

    def validate(self) -> ValidationResult:
        """Validate the case for physical reasonableness and completeness."""
        result = ValidationResult(is_valid=True)

        # === GEOMETRY CHECKS ===
        if self.diameter <= 0:
            result.add_error(f"Diameter must be positive (got {self.diameter} mm)")
        if self.height <= 0:
            result.add_error(f"Height must be positive (got {self.height} mm)")
        if not 0 < self.latitude <= 90:
            result.add_error(f"Latitude must be in (0, 90] degrees (got {self.latitude})")

        # === PRESSURE CHECKS ===
        if self.design_pressure <= 0:
            result.add_error(f"Design pressure must be positive (got {self.design_pressure} kPag)")
        elif self.design_pressure > MAX_DESIGN_PRESSURE_KPAG:
            result.add_error(
                f"Design pressure over {MAX_DESIGN_PRESSURE_KPAG} kPag "
                "- calculation not applicable"
            )

        # === FLUID CHECKS ===
        fluid = self.fluid
        if fluid.vapour_pressure < 0:
            result.add_error(f"Vapour pressure must be >= 0 (got {fluid.vapour_pressure} kPa)")
        if fluid.latent_heat is not None and fluid.latent_heat <= 0:
            result.add_error(f"Latent heat must be positive (got {fluid.latent_heat} kJ/kg)")
        if fluid.molecular_mass is not None and fluid.molecular_mass <= 0:
            result.add_error(f"Molecular mass must be positive (got {fluid.molecular_mass} g/mol)")

        # === STREAM CHECKS ===
        for label, streams in (("Incoming", self.incoming_streams),
                               ("Outgoing", self.outgoing_streams)):
            for stream in streams:
                if stream.flowrate < 0:
                    result.add_error(
                        f"{label} stream '{stream.stream_no}' flowrate must be >= 0 "
                        f"(got {stream.flowrate} m³/h)"
                    )

        # === INSULATION CHECKS ===
        self._validate_insulation(result)

        # === DRAIN CHECKS ===
        if self.drain is not None:
            if self.drain.line_size_mm <= 0:
                result.add_error(f"Drain line size must be positive (got {self.drain.line_size_mm} mm)")
            if self.drain.max_height_above_drain_mm <= 0:
                result.add_error(
                    "Max height above drain must be positive "
                    f"(got {self.drain.max_height_above_drain_mm} mm)"
                )

        # === CAPACITY ===
        if result.is_valid:
            from tankvent.calculations.geometry import calc_max_tank_volume
            capacity = calc_max_tank_volume(self.diameter, self.height)
            if capacity > CAPACITY_WARNING_M3:
                result.add_warning(
                    f"Tank capacity {capacity:.0f} m³ exceeds normal venting table "
                    f"range ({CAPACITY_WARNING_M3:.0f} m³)"
                )

        return result

    def _validate_insulation(self, result: ValidationResult):
        config = self.tank_configuration
        ins = self.insulation

        if not config.is_insulated:
            if ins is not None:
                result.add_warning(
                    f"Insulation data ignored for configuration '{config.value}'"
                )
            return

        if ins is None:
            result.add_error("Insulation data required for insulated tank configurations")
            return

        for name, value in (("thickness_mm", ins.thickness_mm),
                            ("conductivity", ins.conductivity),
                            ("inside_heat_transfer_coeff", ins.inside_heat_transfer_coeff)):
            if value is None:
                result.add_error(f"Insulation {name} required for insulated tank configurations")
            elif value <= 0:
                result.add_error(f"Insulation {name} must be positive (got {value})")

        if config is TankConfiguration.INSULATED_PARTIAL:
            if ins.insulated_area is None:
                result.add_error("Insulated surface area (A_inp) required for partially insulated tank")
            elif ins.insulated_area < 0:
                result.add_error(f"Insulated surface area must be >= 0 (got {ins.insulated_area} m²)")
            elif self.diameter > 0 and self.height > 0:
                from tankvent.calculations.geometry import (
                    calc_shell_surface_area, calc_cone_roof_area, calc_total_surface_area
                )
                total = calc_total_surface_area(
                    calc_shell_surface_area(self.diameter, self.height),
                    calc_cone_roof_area(self.diameter),
                )
                if ins.insulated_area > total:
                    result.add_error(
                        f"Insulated surface area ({ins.insulated_area:.2f} m²) exceeds "
                        f"total tank surface area ({total:.2f} m²)"
                    )

    def validate_or_raise(self) -> ValidationResult:
        """Validate and raise ConfigurationError listing every problem."""
        result = self.validate()
        if not result.is_valid:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(result.errors)}",
                errors=result.errors,
            )
        return result

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CalculationInput':
        """Parse the nested case format, falling back to flat keys."""
        meta = data.get('meta', data)
        tank = data.get('tank', data)
        conf = data.get('configuration', data)
        fluid = data.get('fluid', data)
        streams = data.get('streams', data)
        settings = data.get('settings', data)

        tank_config = conf.get('type', conf.get('tank_configuration', 'BARE_METAL'))
        insulation_data = conf.get('insulation') or data.get('insulation')

        drain_data = data.get('drain')

        return cls(
            tank_number=str(meta.get('tank_number', 'TK-001')),
            description=meta.get('description'),
            diameter=float(tank.get('diameter_mm', tank.get('diameter', 10_000.0))),
            height=float(tank.get('height_mm', tank.get('height', 10_000.0))),
            latitude=float(tank.get('latitude_deg', tank.get('latitude', 45.0))),
            design_pressure=float(tank.get('design_pressure_kpag',
                                           tank.get('design_pressure', 5.0))),
            tank_configuration=TankConfiguration.parse(tank_config),
            insulation=Insulation.from_dict(insulation_data) if insulation_data else None,
            fluid=FluidProperties.from_dict(fluid),
            incoming_streams=tuple(
                Stream.from_dict(s) for s in streams.get('incoming', streams.get('incoming_streams', []))
            ),
            outgoing_streams=tuple(
                Stream.from_dict(s) for s in streams.get('outgoing', streams.get('outgoing_streams', []))
            ),
            drain=DrainSystem.from_dict(drain_data) if drain_data else None,
            api_edition=ApiEdition.parse(settings.get('api_edition', '7TH')),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the nested case format."""
        data = {
            'meta': {
                'tank_number': self.tank_number,
                'description': self.description,
            },
            'tank': {
                'diameter_mm': self.diameter,
                'height_mm': self.height,
                'latitude_deg': self.latitude,
                'design_pressure_kpag': self.design_pressure,
            },
            'configuration': {
                'type': self.tank_configuration.name,
                'insulation': self.insulation.to_dict() if self.insulation else None,
            },
            'fluid': self.fluid.to_dict(),
            'streams': {
                'incoming': [s.to_dict() for s in self.incoming_streams],
                'outgoing': [s.to_dict() for s in self.outgoing_streams],
            },
            'drain': self.drain.to_dict() if self.drain else None,
            'settings': {
                'api_edition': self.api_edition.value,
            },
        }
        return data

    @classmethod
    def from_yaml(cls, path: str) -> 'CalculationInput':
        """Load a case from a YAML file."""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls.from_dict(data)

    def to_yaml(self, path: str):
        """Save the case to a YAML file."""
        with open(path, 'w') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_json(cls, text: str) -> 'CalculationInput':
        return cls.from_dict(json.loads(text))

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_file(cls, path: str) -> 'CalculationInput':
        """Load a case from a .yaml/.yml or .json file."""
        if str(path).lower().endswith('.json'):
            with open(path, 'r') as f:
                return cls.from_json(f.read())
        return cls.from_yaml(path)

    def copy(self, **updates) -> 'CalculationInput':
        """Create a copy with optional field updates."""
        return replace(self, **updates)


# =============================================================================
# HELPERS
# =============================================================================

def _opt_float(value) -> Optional[float]:
    return None if value is None else float(value)


def _stream_tuple(streams: Iterable) -> Tuple[Stream, ...]:
    return tuple(
        s if isinstance(s, Stream) else Stream.from_dict(s)
        for s in (streams or ())
    )


# =============================================================================
# REFERENCE CASES
# =============================================================================

def reference_case() -> CalculationInput:
    """TK-3120 worksheet case: 7th edition, bare metal, 24 m x 17.5 m."""
    return CalculationInput(
        tank_number="TK-3120",
        diameter=24_000.0,
        height=17_500.0,
        latitude=12.7,
        design_pressure=101.32,
        tank_configuration=TankConfiguration.BARE_METAL,
        fluid=FluidProperties(
            avg_storage_temp=35.0,
            vapour_pressure=5.6,
            flash_boiling_point_type=FlashBoilingPointType.FP,
        ),
        outgoing_streams=(Stream("S-1", 368.9),),
        api_edition=ApiEdition.SEVENTH,
    )
