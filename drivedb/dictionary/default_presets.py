# Path: drivedb/dictionary/default_presets.py
"""
Built-in DEFAULT Presets

Standard SMART attribute decoding rules used as the baseline when the
rule file does not provide its own DEFAULT entry.
"""

from typing import Final

from ..constants import DEFAULT_FAMILY
from ..process.resolver.models.drive_model import AttributeOverride, ModelDefinition
from ..process.resolver.models.rule_set import RuleSet


# attribute id -> (conv, name)
DEFAULT_PRESETS: Final[dict[str, tuple[str, str]]] = {
    '1': ('raw48', 'Raw_Read_Error_Rate'),
    '2': ('raw48', 'Throughput_Performance'),
    '3': ('raw16(avg16)', 'Spin_Up_Time'),
    '4': ('raw48', 'Start_Stop_Count'),
    '5': ('raw16(raw16)', 'Reallocated_Sector_Ct'),
    '6': ('raw48', 'Read_Channel_Margin'),
    '7': ('raw48', 'Seek_Error_Rate'),
    '8': ('raw48', 'Seek_Time_Performance'),
    '9': ('raw24(raw8)', 'Power_On_Hours'),
    '10': ('raw48', 'Spin_Retry_Count'),
    '11': ('raw48', 'Calibration_Retry_Count'),
    '12': ('raw48', 'Power_Cycle_Count'),
    '13': ('raw48', 'Read_Soft_Error_Rate'),
    '175': ('raw48', 'Program_Fail_Count_Chip'),
    '176': ('raw48', 'Erase_Fail_Count_Chip'),
    '177': ('raw48', 'Wear_Leveling_Count'),
    '178': ('raw48', 'Used_Rsvd_Blk_Cnt_Chip'),
    '179': ('raw48', 'Used_Rsvd_Blk_Cnt_Tot'),
    '180': ('raw48', 'Unused_Rsvd_Blk_Cnt_Tot'),
    '181': ('raw48', 'Program_Fail_Cnt_Total'),
    '182': ('raw48', 'Erase_Fail_Count_Total'),
    '183': ('raw48', 'Runtime_Bad_Block'),
    '184': ('raw48', 'End-to-End_Error'),
    '187': ('raw48', 'Reported_Uncorrect'),
    '188': ('raw48', 'Command_Timeout'),
    '189': ('raw48', 'High_Fly_Writes'),
    '190': ('tempminmax', 'Airflow_Temperature_Cel'),
    '191': ('raw48', 'G-Sense_Error_Rate'),
    '192': ('raw48', 'Power-Off_Retract_Count'),
    '193': ('raw48', 'Load_Cycle_Count'),
    '194': ('tempminmax', 'Temperature_Celsius'),
    '195': ('raw48', 'Hardware_ECC_Recovered'),
    '196': ('raw16(raw16)', 'Reallocated_Event_Count'),
    '197': ('raw48', 'Current_Pending_Sector'),
    '198': ('raw48', 'Offline_Uncorrectable'),
    '199': ('raw48', 'UDMA_CRC_Error_Count'),
    '200': ('raw48', 'Multi_Zone_Error_Rate'),
    '201': ('raw48', 'Soft_Read_Error_Rate'),
    '202': ('raw48', 'Data_Address_Mark_Errs'),
    '203': ('raw48', 'Run_Out_Cancel'),
    '204': ('raw48', 'Soft_ECC_Correction'),
    '205': ('raw48', 'Thermal_Asperity_Rate'),
    '206': ('raw48', 'Flying_Height'),
    '207': ('raw48', 'Spin_High_Current'),
    '208': ('raw48', 'Spin_Buzz'),
    '209': ('raw48', 'Offline_Seek_Performnce'),
    '220': ('raw48', 'Disk_Shift'),
    '221': ('raw48', 'G-Sense_Error_Rate'),
    '222': ('raw48', 'Loaded_Hours'),
    '223': ('raw48', 'Load_Retry_Count'),
    '224': ('raw48', 'Load_Friction'),
    '225': ('raw48', 'Load_Cycle_Count'),
    '226': ('raw48', 'Load-in_Time'),
    '227': ('raw48', 'Torq-amp_Count'),
    '228': ('raw48', 'Power-off_Retract_Count'),
    '230': ('raw48', 'Head_Amplitude'),
    '231': ('raw48', 'Temperature_Celsius'),
    '232': ('raw48', 'Available_Reservd_Space'),
    '233': ('raw48', 'Media_Wearout_Indicator'),
    '240': ('raw24(raw8)', 'Head_Flying_Hours'),
    '241': ('raw48', 'Total_LBAs_Written'),
    '242': ('raw48', 'Total_LBAs_Read'),
    '250': ('raw48', 'Read_Error_Retry_Rate'),
    '254': ('raw48', 'Free_Fall_Sensor'),
}


def default_rule_set() -> RuleSet:
    """
    Build the built-in baseline rule set.

    Each call returns a new, independent RuleSet holding a single
    DEFAULT entry.

    Example:
        rule_set = open_rule_set(path).with_defaults(default_rule_set())
    """
    presets = {
        attr_id: AttributeOverride(conv=conv, name=name)
        for attr_id, (conv, name) in DEFAULT_PRESETS.items()
    }
    return RuleSet([ModelDefinition(family=DEFAULT_FAMILY, presets=presets)])


__all__ = ['DEFAULT_PRESETS', 'default_rule_set']
