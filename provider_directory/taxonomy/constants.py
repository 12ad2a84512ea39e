"""
NUCC Health Care Provider Taxonomy → specialty category tables.

Ground-truth data for the taxonomy classifier; nothing here is computed.

Code format: 10 characters, e.g. 207RE0101X
  chars 1–4   provider type / classification  (207R = Internal Medicine)
  chars 5–9   specialization                  (E0101 = Endocrinology)
  char 10     always "X"

Lookup order used by the classifier:
  1. TAXONOMY_TO_SPECIALTY  exact code
  2. PREFIX_MAPPINGS        longest matching prefix
  3. SpecialtyCategory.OTHER

Reference: https://taxonomy.nucc.org/
"""


class SpecialtyCategory:
    ENDOCRINOLOGY = "ENDOCRINOLOGY"
    RHEUMATOLOGY = "RHEUMATOLOGY"
    ORTHOPEDICS = "ORTHOPEDICS"
    INTERNAL_MEDICINE = "INTERNAL_MEDICINE"
    FAMILY_MEDICINE = "FAMILY_MEDICINE"
    GERIATRICS = "GERIATRICS"
    MENTAL_HEALTH = "MENTAL_HEALTH"
    PSYCHIATRY = "PSYCHIATRY"
    PSYCHOLOGY = "PSYCHOLOGY"
    SOCIAL_WORK = "SOCIAL_WORK"
    NURSING = "NURSING"
    NURSE_PRACTITIONER = "NURSE_PRACTITIONER"
    PHYSICIAN_ASSISTANT = "PHYSICIAN_ASSISTANT"
    MIDWIFERY = "MIDWIFERY"
    DENTISTRY = "DENTISTRY"
    OPTOMETRY = "OPTOMETRY"
    PHARMACY = "PHARMACY"
    PHYSICAL_THERAPY = "PHYSICAL_THERAPY"
    OCCUPATIONAL_THERAPY = "OCCUPATIONAL_THERAPY"
    SPEECH_THERAPY = "SPEECH_THERAPY"
    RESPIRATORY_THERAPY = "RESPIRATORY_THERAPY"
    CHIROPRACTIC = "CHIROPRACTIC"
    ACUPUNCTURE = "ACUPUNCTURE"
    EMERGENCY_MEDICINE = "EMERGENCY_MEDICINE"
    PEDIATRICS = "PEDIATRICS"
    ANESTHESIOLOGY = "ANESTHESIOLOGY"
    SURGERY = "SURGERY"
    OB_GYN = "OB_GYN"
    CARDIOLOGY = "CARDIOLOGY"
    RADIOLOGY = "RADIOLOGY"
    DERMATOLOGY = "DERMATOLOGY"
    NEUROLOGY = "NEUROLOGY"
    ONCOLOGY = "ONCOLOGY"
    UROLOGY = "UROLOGY"
    GASTROENTEROLOGY = "GASTROENTEROLOGY"
    PULMONOLOGY = "PULMONOLOGY"
    NEPHROLOGY = "NEPHROLOGY"
    INFECTIOUS_DISEASE = "INFECTIOUS_DISEASE"
    ALLERGY_IMMUNOLOGY = "ALLERGY_IMMUNOLOGY"
    PATHOLOGY = "PATHOLOGY"
    DIETETICS = "DIETETICS"
    LAB_PATHOLOGY = "LAB_PATHOLOGY"
    DME_PROSTHETICS = "DME_PROSTHETICS"
    COMMUNITY_HEALTH = "COMMUNITY_HEALTH"
    HOME_HEALTH = "HOME_HEALTH"
    HOSPICE_PALLIATIVE = "HOSPICE_PALLIATIVE"
    OPHTHALMOLOGY = "OPHTHALMOLOGY"
    PODIATRY = "PODIATRY"
    PHYSICAL_MEDICINE_REHAB = "PHYSICAL_MEDICINE_REHAB"
    GENERAL_PRACTICE = "GENERAL_PRACTICE"
    PLASTIC_SURGERY = "PLASTIC_SURGERY"
    PREVENTIVE_MEDICINE = "PREVENTIVE_MEDICINE"
    NUCLEAR_MEDICINE = "NUCLEAR_MEDICINE"
    COLON_RECTAL_SURGERY = "COLON_RECTAL_SURGERY"
    CLINIC_FACILITY = "CLINIC_FACILITY"
    HOSPITAL = "HOSPITAL"
    OTHER = "OTHER"


SPECIALTY_CATEGORIES: tuple[str, ...] = tuple(
    value
    for name, value in vars(SpecialtyCategory).items()
    if not name.startswith("_")
)


# ══════════════════════════════════════════════════════════════════════════════
# Exact code → category
# ══════════════════════════════════════════════════════════════════════════════

TAXONOMY_TO_SPECIALTY: dict[str, str] = {
    # ══════════════════════════════════════════════════════════════════════════
    # ENDOCRINOLOGY (207RE*, 261QE*)
    # ══════════════════════════════════════════════════════════════════════════
    "207RE0101X": "ENDOCRINOLOGY",
    "207RI0011X": "ENDOCRINOLOGY",
    "261QE0700X": "ENDOCRINOLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # RHEUMATOLOGY (207RR*, 261QR*)
    # ══════════════════════════════════════════════════════════════════════════
    "207RR0500X": "RHEUMATOLOGY",
    "261QR0401X": "RHEUMATOLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # ORTHOPEDICS (207X*)
    # ══════════════════════════════════════════════════════════════════════════
    "207X00000X": "ORTHOPEDICS",
    "207XS0114X": "ORTHOPEDICS",
    "207XS0106X": "ORTHOPEDICS",
    "207XS0117X": "ORTHOPEDICS",
    "207XX0004X": "ORTHOPEDICS",
    "207XX0005X": "ORTHOPEDICS",
    "207XX0801X": "ORTHOPEDICS",
    "207XP3100X": "ORTHOPEDICS",

    # ══════════════════════════════════════════════════════════════════════════
    # INTERNAL MEDICINE (207R*)
    # ══════════════════════════════════════════════════════════════════════════
    "207R00000X": "INTERNAL_MEDICINE",
    "207RA0000X": "INTERNAL_MEDICINE",
    "207RA0001X": "INTERNAL_MEDICINE",
    "207RC0000X": "CARDIOLOGY",
    "207RI0200X": "INFECTIOUS_DISEASE",
    "207RG0100X": "GASTROENTEROLOGY",
    "207RH0000X": "INTERNAL_MEDICINE",
    "207RH0003X": "ONCOLOGY",
    "207RI0008X": "INTERNAL_MEDICINE",
    "207RN0300X": "NEPHROLOGY",
    "207RP1001X": "PULMONOLOGY",
    "207RC0200X": "PULMONOLOGY",
    "207RC0001X": "CARDIOLOGY",
    "207RM1200X": "INTERNAL_MEDICINE",

    # ══════════════════════════════════════════════════════════════════════════
    # FAMILY MEDICINE (207Q*)
    # ══════════════════════════════════════════════════════════════════════════
    "207Q00000X": "FAMILY_MEDICINE",
    "207QA0000X": "FAMILY_MEDICINE",
    "207QA0401X": "FAMILY_MEDICINE",
    "207QA0505X": "FAMILY_MEDICINE",
    "207QB0002X": "FAMILY_MEDICINE",
    "207QH0002X": "HOSPICE_PALLIATIVE",
    "207QS0010X": "FAMILY_MEDICINE",
    "207QS1201X": "FAMILY_MEDICINE",

    # ══════════════════════════════════════════════════════════════════════════
    # GERIATRICS (207QG*, 207RG*)
    # ══════════════════════════════════════════════════════════════════════════
    "207QG0300X": "GERIATRICS",
    "207RG0300X": "GERIATRICS",

    # ══════════════════════════════════════════════════════════════════════════
    # MENTAL HEALTH & COUNSELING (101*, 106*)
    # ══════════════════════════════════════════════════════════════════════════
    "101Y00000X": "MENTAL_HEALTH",
    "101YA0400X": "MENTAL_HEALTH",
    "101YM0800X": "MENTAL_HEALTH",
    "101YP1600X": "MENTAL_HEALTH",
    "101YP2500X": "MENTAL_HEALTH",
    "101YS0200X": "MENTAL_HEALTH",
    "106E00000X": "MENTAL_HEALTH",
    "106H00000X": "MENTAL_HEALTH",
    "106S00000X": "MENTAL_HEALTH",

    # ══════════════════════════════════════════════════════════════════════════
    # PSYCHOLOGY (103*)
    # ══════════════════════════════════════════════════════════════════════════
    "103G00000X": "PSYCHOLOGY",
    "103GC0700X": "PSYCHOLOGY",
    "103K00000X": "PSYCHOLOGY",
    "103T00000X": "PSYCHOLOGY",
    "103TA0400X": "PSYCHOLOGY",
    "103TA0700X": "PSYCHOLOGY",
    "103TB0200X": "PSYCHOLOGY",
    "103TC0700X": "PSYCHOLOGY",
    "103TC1900X": "PSYCHOLOGY",
    "103TC2200X": "PSYCHOLOGY",
    "103TE1100X": "PSYCHOLOGY",
    "103TF0000X": "PSYCHOLOGY",
    "103TF0200X": "PSYCHOLOGY",
    "103TH0004X": "PSYCHOLOGY",
    "103TH0100X": "PSYCHOLOGY",
    "103TM1800X": "PSYCHOLOGY",
    "103TP0016X": "PSYCHOLOGY",
    "103TP0814X": "PSYCHOLOGY",
    "103TP2701X": "PSYCHOLOGY",
    "103TR0400X": "PSYCHOLOGY",
    "103TS0200X": "PSYCHOLOGY",
    "103TW0100X": "PSYCHOLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # PSYCHIATRY (2084*)
    # ══════════════════════════════════════════════════════════════════════════
    "2084A0401X": "PSYCHIATRY",
    "2084A2900X": "PSYCHIATRY",
    "2084B0002X": "PSYCHIATRY",
    "2084B0040X": "PSYCHIATRY",
    "2084D0003X": "PSYCHIATRY",
    "2084F0202X": "PSYCHIATRY",
    "2084H0002X": "PSYCHIATRY",
    "2084N0008X": "PSYCHIATRY",
    "2084N0400X": "NEUROLOGY",
    "2084N0402X": "NEUROLOGY",
    "2084N0600X": "NEUROLOGY",
    "2084P0005X": "PSYCHIATRY",
    "2084P0015X": "PSYCHIATRY",
    "2084P0301X": "PSYCHIATRY",
    "2084P0800X": "PSYCHIATRY",
    "2084P0802X": "PSYCHIATRY",
    "2084P0804X": "PSYCHIATRY",
    "2084P0805X": "PSYCHIATRY",
    "2084P2900X": "PSYCHIATRY",
    "2084S0010X": "PSYCHIATRY",
    "2084S0012X": "PSYCHIATRY",
    "2084V0102X": "PSYCHIATRY",

    # ══════════════════════════════════════════════════════════════════════════
    # SOCIAL WORK (104*)
    # ══════════════════════════════════════════════════════════════════════════
    "104100000X": "SOCIAL_WORK",
    "1041C0700X": "SOCIAL_WORK",
    "1041S0200X": "SOCIAL_WORK",

    # ══════════════════════════════════════════════════════════════════════════
    # NURSING (163*, 164*)
    # ══════════════════════════════════════════════════════════════════════════
    "163W00000X": "NURSING",
    "163WA0400X": "NURSING",
    "163WA2000X": "NURSING",
    "163WC0200X": "NURSING",
    "163WC0400X": "NURSING",
    "163WC1400X": "NURSING",
    "163WC1500X": "NURSING",
    "163WC1600X": "NURSING",
    "163WC2100X": "NURSING",
    "163WC3500X": "NURSING",
    "163WD0400X": "NURSING",
    "163WD1100X": "NURSING",
    "163WE0003X": "NURSING",
    "163WE0900X": "NURSING",
    "163WF0300X": "NURSING",
    "163WG0000X": "NURSING",
    "163WG0100X": "NURSING",
    "163WG0600X": "NURSING",
    "163WH0200X": "NURSING",
    "163WH0500X": "NURSING",
    "163WH1000X": "NURSING",
    "163WI0500X": "NURSING",
    "163WI0600X": "NURSING",
    "163WL0100X": "NURSING",
    "163WM0102X": "NURSING",
    "163WM0705X": "NURSING",
    "163WM1400X": "NURSING",
    "163WN0002X": "NURSING",
    "163WN0003X": "NURSING",
    "163WN0300X": "NURSING",
    "163WN0800X": "NURSING",
    "163WN1003X": "NURSING",
    "163WP0000X": "NURSING",
    "163WP0200X": "NURSING",
    "163WP0218X": "NURSING",
    "163WP0807X": "NURSING",
    "163WP0808X": "NURSING",
    "163WP0809X": "NURSING",
    "163WP1700X": "NURSING",
    "163WP2201X": "NURSING",
    "163WR0006X": "NURSING",
    "163WR0400X": "NURSING",
    "163WR1000X": "NURSING",
    "163WS0121X": "NURSING",
    "163WS0200X": "NURSING",
    "163WU0100X": "NURSING",
    "163WW0000X": "NURSING",
    "163WW0101X": "NURSING",
    "163WX0002X": "NURSING",
    "163WX0003X": "NURSING",
    "163WX0106X": "NURSING",
    "163WX0200X": "NURSING",
    "163WX0601X": "NURSING",
    "163WX0800X": "NURSING",
    "163WX1100X": "NURSING",
    "163WX1500X": "NURSING",
    "164W00000X": "NURSING",
    "164X00000X": "NURSING",

    # ══════════════════════════════════════════════════════════════════════════
    # NURSE PRACTITIONER (363L*)
    # ══════════════════════════════════════════════════════════════════════════
    "363L00000X": "NURSE_PRACTITIONER",
    "363LA2100X": "NURSE_PRACTITIONER",
    "363LA2200X": "NURSE_PRACTITIONER",
    "363LC0200X": "NURSE_PRACTITIONER",
    "363LC1500X": "NURSE_PRACTITIONER",
    "363LF0000X": "NURSE_PRACTITIONER",
    "363LG0600X": "NURSE_PRACTITIONER",
    "363LN0000X": "NURSE_PRACTITIONER",
    "363LN0005X": "NURSE_PRACTITIONER",
    "363LP0200X": "NURSE_PRACTITIONER",
    "363LP0222X": "NURSE_PRACTITIONER",
    "363LP0808X": "NURSE_PRACTITIONER",
    "363LP1700X": "NURSE_PRACTITIONER",
    "363LP2300X": "NURSE_PRACTITIONER",
    "363LS0200X": "NURSE_PRACTITIONER",
    "363LW0102X": "NURSE_PRACTITIONER",
    "363LX0001X": "NURSE_PRACTITIONER",
    "363LX0106X": "NURSE_PRACTITIONER",
    "363AM0700X": "NURSE_PRACTITIONER",

    # ══════════════════════════════════════════════════════════════════════════
    # PHYSICIAN ASSISTANT (363A*)
    # ══════════════════════════════════════════════════════════════════════════
    "363A00000X": "PHYSICIAN_ASSISTANT",
    "363AS0400X": "PHYSICIAN_ASSISTANT",

    # ══════════════════════════════════════════════════════════════════════════
    # MIDWIFERY (171M*, 176B*)
    # ══════════════════════════════════════════════════════════════════════════
    "171M00000X": "MIDWIFERY",
    "176B00000X": "MIDWIFERY",

    # ══════════════════════════════════════════════════════════════════════════
    # DENTISTRY (122*, 123*, 124*, 125*, 126*)
    # ══════════════════════════════════════════════════════════════════════════
    "122300000X": "DENTISTRY",
    "1223D0001X": "DENTISTRY",
    "1223D0004X": "DENTISTRY",
    "1223E0200X": "DENTISTRY",
    "1223G0001X": "DENTISTRY",
    "1223P0106X": "DENTISTRY",
    "1223P0221X": "DENTISTRY",
    "1223P0300X": "DENTISTRY",
    "1223P0700X": "DENTISTRY",
    "1223S0112X": "DENTISTRY",
    "1223X0008X": "DENTISTRY",
    "1223X0400X": "DENTISTRY",
    "1223X2210X": "DENTISTRY",
    "124Q00000X": "DENTISTRY",
    "125J00000X": "DENTISTRY",
    "125K00000X": "DENTISTRY",
    "125Q00000X": "DENTISTRY",
    "126800000X": "DENTISTRY",
    "126900000X": "DENTISTRY",

    # ══════════════════════════════════════════════════════════════════════════
    # OPTOMETRY (152*)
    # ══════════════════════════════════════════════════════════════════════════
    "152W00000X": "OPTOMETRY",
    "152WC0802X": "OPTOMETRY",
    "152WL0500X": "OPTOMETRY",
    "152WP0200X": "OPTOMETRY",
    "152WS0006X": "OPTOMETRY",
    "152WV0400X": "OPTOMETRY",
    "152WX0102X": "OPTOMETRY",
    "156F00000X": "OPTOMETRY",
    "156FC0800X": "OPTOMETRY",
    "156FC0801X": "OPTOMETRY",
    "156FX1100X": "OPTOMETRY",
    "156FX1101X": "OPTOMETRY",
    "156FX1201X": "OPTOMETRY",
    "156FX1202X": "OPTOMETRY",
    "156FX1700X": "OPTOMETRY",
    "156FX1800X": "OPTOMETRY",
    "156FX1900X": "OPTOMETRY",

    # ══════════════════════════════════════════════════════════════════════════
    # PHARMACY (183*)
    # ══════════════════════════════════════════════════════════════════════════
    "183500000X": "PHARMACY",
    "1835C0205X": "PHARMACY",
    "1835G0000X": "PHARMACY",
    "1835G0303X": "PHARMACY",
    "1835N0905X": "PHARMACY",
    "1835N1003X": "PHARMACY",
    "1835P0018X": "PHARMACY",
    "1835P0200X": "PHARMACY",
    "1835P1200X": "PHARMACY",
    "1835P1300X": "PHARMACY",
    "1835P2201X": "PHARMACY",
    "1835X0200X": "PHARMACY",
    "183700000X": "PHARMACY",

    # ══════════════════════════════════════════════════════════════════════════
    # PHYSICAL THERAPY (225*)
    # ══════════════════════════════════════════════════════════════════════════
    "225100000X": "PHYSICAL_THERAPY",
    "2251C0400X": "PHYSICAL_THERAPY",
    "2251C2600X": "PHYSICAL_THERAPY",
    "2251E1200X": "PHYSICAL_THERAPY",
    "2251E1300X": "PHYSICAL_THERAPY",
    "2251G0304X": "PHYSICAL_THERAPY",
    "2251H1200X": "PHYSICAL_THERAPY",
    "2251H1300X": "PHYSICAL_THERAPY",
    "2251N0400X": "PHYSICAL_THERAPY",
    "2251P0200X": "PHYSICAL_THERAPY",
    "2251S0007X": "PHYSICAL_THERAPY",
    "2251X0800X": "PHYSICAL_THERAPY",
    "225200000X": "PHYSICAL_THERAPY",

    # ══════════════════════════════════════════════════════════════════════════
    # OCCUPATIONAL THERAPY (225X*, 224*)
    # ══════════════════════════════════════════════════════════════════════════
    "225X00000X": "OCCUPATIONAL_THERAPY",
    "225XE0001X": "OCCUPATIONAL_THERAPY",
    "225XE1200X": "OCCUPATIONAL_THERAPY",
    "225XF0002X": "OCCUPATIONAL_THERAPY",
    "225XG0600X": "OCCUPATIONAL_THERAPY",
    "225XH1200X": "OCCUPATIONAL_THERAPY",
    "225XH1300X": "OCCUPATIONAL_THERAPY",
    "225XL0004X": "OCCUPATIONAL_THERAPY",
    "225XM0800X": "OCCUPATIONAL_THERAPY",
    "225XN1300X": "OCCUPATIONAL_THERAPY",
    "225XP0019X": "OCCUPATIONAL_THERAPY",
    "225XP0200X": "OCCUPATIONAL_THERAPY",
    "225XR0403X": "OCCUPATIONAL_THERAPY",
    "224Z00000X": "OCCUPATIONAL_THERAPY",

    # ══════════════════════════════════════════════════════════════════════════
    # SPEECH THERAPY (225*, 235*)
    # ══════════════════════════════════════════════════════════════════════════
    "225700000X": "SPEECH_THERAPY",
    "235500000X": "SPEECH_THERAPY",
    "235Z00000X": "SPEECH_THERAPY",
    "237600000X": "SPEECH_THERAPY",
    "237700000X": "SPEECH_THERAPY",

    # ══════════════════════════════════════════════════════════════════════════
    # RESPIRATORY THERAPY (227*, 367*)
    # ══════════════════════════════════════════════════════════════════════════
    "227800000X": "RESPIRATORY_THERAPY",
    "227900000X": "RESPIRATORY_THERAPY",
    "367500000X": "RESPIRATORY_THERAPY",
    "367A00000X": "RESPIRATORY_THERAPY",
    "367H00000X": "RESPIRATORY_THERAPY",

    # ══════════════════════════════════════════════════════════════════════════
    # CHIROPRACTIC (111*)
    # ══════════════════════════════════════════════════════════════════════════
    "111N00000X": "CHIROPRACTIC",
    "111NI0013X": "CHIROPRACTIC",
    "111NI0900X": "CHIROPRACTIC",
    "111NN0400X": "CHIROPRACTIC",
    "111NN1001X": "CHIROPRACTIC",
    "111NP0017X": "CHIROPRACTIC",
    "111NR0200X": "CHIROPRACTIC",
    "111NR0400X": "CHIROPRACTIC",
    "111NS0005X": "CHIROPRACTIC",
    "111NT0100X": "CHIROPRACTIC",
    "111NX0100X": "CHIROPRACTIC",
    "111NX0800X": "CHIROPRACTIC",

    # ══════════════════════════════════════════════════════════════════════════
    # ACUPUNCTURE (171*)
    # ══════════════════════════════════════════════════════════════════════════
    "171100000X": "ACUPUNCTURE",

    # ══════════════════════════════════════════════════════════════════════════
    # EMERGENCY MEDICINE (207P*)
    # ══════════════════════════════════════════════════════════════════════════
    "207P00000X": "EMERGENCY_MEDICINE",
    "207PE0004X": "EMERGENCY_MEDICINE",
    "207PE0005X": "EMERGENCY_MEDICINE",
    "207PH0002X": "EMERGENCY_MEDICINE",
    "207PP0204X": "EMERGENCY_MEDICINE",
    "207PS0010X": "EMERGENCY_MEDICINE",
    "207PT0002X": "EMERGENCY_MEDICINE",

    # ══════════════════════════════════════════════════════════════════════════
    # PEDIATRICS (208*)
    # ══════════════════════════════════════════════════════════════════════════
    "208000000X": "PEDIATRICS",
    "2080A0000X": "PEDIATRICS",
    "2080B0002X": "PEDIATRICS",
    "2080C0008X": "PEDIATRICS",
    "2080H0002X": "PEDIATRICS",
    "2080I0007X": "PEDIATRICS",
    "2080N0001X": "PEDIATRICS",
    "2080P0006X": "PEDIATRICS",
    "2080P0008X": "PEDIATRICS",
    "2080P0201X": "PEDIATRICS",
    "2080P0202X": "PEDIATRICS",
    "2080P0203X": "PEDIATRICS",
    "2080P0204X": "PEDIATRICS",
    "2080P0205X": "PEDIATRICS",
    "2080P0206X": "PEDIATRICS",
    "2080P0207X": "PEDIATRICS",
    "2080P0208X": "PEDIATRICS",
    "2080P0210X": "PEDIATRICS",
    "2080P0214X": "PEDIATRICS",
    "2080P0216X": "PEDIATRICS",
    "2080S0010X": "PEDIATRICS",
    "2080S0012X": "PEDIATRICS",
    "2080T0002X": "PEDIATRICS",
    "2080T0004X": "PEDIATRICS",

    # ══════════════════════════════════════════════════════════════════════════
    # ANESTHESIOLOGY (207L*)
    # ══════════════════════════════════════════════════════════════════════════
    "207L00000X": "ANESTHESIOLOGY",
    "207LA0401X": "ANESTHESIOLOGY",
    "207LC0200X": "ANESTHESIOLOGY",
    "207LH0002X": "ANESTHESIOLOGY",
    "207LP2900X": "ANESTHESIOLOGY",
    "207LP3000X": "ANESTHESIOLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # SURGERY (208*)
    # ══════════════════════════════════════════════════════════════════════════
    "208600000X": "SURGERY",
    "2086H0002X": "SURGERY",
    "2086S0102X": "SURGERY",
    "2086S0105X": "SURGERY",
    "2086S0120X": "SURGERY",
    "2086S0122X": "SURGERY",
    "2086S0127X": "SURGERY",
    "2086S0129X": "SURGERY",
    "2086X0206X": "SURGERY",
    "208G00000X": "SURGERY",
    "208G00001X": "SURGERY",
    "208M00000X": "SURGERY",
    "208VP0000X": "SURGERY",
    "208VP0014X": "SURGERY",

    # ══════════════════════════════════════════════════════════════════════════
    # OB/GYN (207V*)
    # ══════════════════════════════════════════════════════════════════════════
    "207V00000X": "OB_GYN",
    "207VB0002X": "OB_GYN",
    "207VC0200X": "OB_GYN",
    "207VE0102X": "OB_GYN",
    "207VF0040X": "OB_GYN",
    "207VG0400X": "OB_GYN",
    "207VH0002X": "OB_GYN",
    "207VM0101X": "OB_GYN",
    "207VX0000X": "OB_GYN",
    "207VX0201X": "OB_GYN",

    # ══════════════════════════════════════════════════════════════════════════
    # CARDIOLOGY — additional codes not in Internal Medicine section
    # ══════════════════════════════════════════════════════════════════════════
    "207RI0001X": "CARDIOLOGY",
    "207RY0107X": "CARDIOLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # RADIOLOGY (2085*)
    # ══════════════════════════════════════════════════════════════════════════
    "2085B0100X": "RADIOLOGY",
    "2085D0003X": "RADIOLOGY",
    "2085H0002X": "RADIOLOGY",
    "2085N0700X": "RADIOLOGY",
    "2085N0904X": "RADIOLOGY",
    "2085P0229X": "RADIOLOGY",
    "2085R0001X": "RADIOLOGY",
    "2085R0202X": "RADIOLOGY",
    "2085R0203X": "RADIOLOGY",
    "2085R0204X": "RADIOLOGY",
    "2085R0205X": "RADIOLOGY",
    "2085U0001X": "RADIOLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # DERMATOLOGY (207N*)
    # ══════════════════════════════════════════════════════════════════════════
    "207N00000X": "DERMATOLOGY",
    "207ND0101X": "DERMATOLOGY",
    "207ND0900X": "DERMATOLOGY",
    "207NI0002X": "DERMATOLOGY",
    "207NP0225X": "DERMATOLOGY",
    "207NS0135X": "DERMATOLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # NEUROLOGY — additional codes not in Psychiatry section
    # ══════════════════════════════════════════════════════════════════════════
    "204D00000X": "NEUROLOGY",
    "204C00000X": "NEUROLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # UROLOGY (2088*)
    # ══════════════════════════════════════════════════════════════════════════
    "208800000X": "UROLOGY",
    "2088F0040X": "UROLOGY",
    "2088P0231X": "UROLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # ALLERGY & IMMUNOLOGY (207K*)
    # ══════════════════════════════════════════════════════════════════════════
    "207K00000X": "ALLERGY_IMMUNOLOGY",
    "207KA0200X": "ALLERGY_IMMUNOLOGY",
    "207KI0005X": "ALLERGY_IMMUNOLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # PATHOLOGY (207Z*)
    # ══════════════════════════════════════════════════════════════════════════
    "207ZB0001X": "PATHOLOGY",
    "207ZC0006X": "PATHOLOGY",
    "207ZC0008X": "PATHOLOGY",
    "207ZC0500X": "PATHOLOGY",
    "207ZD0900X": "PATHOLOGY",
    "207ZF0201X": "PATHOLOGY",
    "207ZH0000X": "PATHOLOGY",
    "207ZI0100X": "PATHOLOGY",
    "207ZM0300X": "PATHOLOGY",
    "207ZN0500X": "PATHOLOGY",
    "207ZP0007X": "PATHOLOGY",
    "207ZP0101X": "PATHOLOGY",
    "207ZP0102X": "PATHOLOGY",
    "207ZP0104X": "PATHOLOGY",
    "207ZP0105X": "PATHOLOGY",
    "207ZP0213X": "PATHOLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # DIETETICS (133*)
    # ══════════════════════════════════════════════════════════════════════════
    "133N00000X": "DIETETICS",
    "133NN1002X": "DIETETICS",
    "133V00000X": "DIETETICS",
    "133VN1004X": "DIETETICS",
    "133VN1005X": "DIETETICS",
    "133VN1006X": "DIETETICS",
    "136A00000X": "DIETETICS",

    # ══════════════════════════════════════════════════════════════════════════
    # LAB/PATHOLOGY TECHNICIANS (374*)
    # ══════════════════════════════════════════════════════════════════════════
    "374700000X": "LAB_PATHOLOGY",
    "3747A0650X": "LAB_PATHOLOGY",
    "3747P1801X": "LAB_PATHOLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # DME & PROSTHETICS (310*, 332*, 335*)
    # ══════════════════════════════════════════════════════════════════════════
    "310400000X": "DME_PROSTHETICS",
    "310500000X": "DME_PROSTHETICS",
    "332B00000X": "DME_PROSTHETICS",
    "332BC3200X": "DME_PROSTHETICS",
    "332BD1200X": "DME_PROSTHETICS",
    "332BN1400X": "DME_PROSTHETICS",
    "332BP3500X": "DME_PROSTHETICS",
    "332BX2000X": "DME_PROSTHETICS",
    "335E00000X": "DME_PROSTHETICS",
    "335G00000X": "DME_PROSTHETICS",
    "335U00000X": "DME_PROSTHETICS",
    "335V00000X": "DME_PROSTHETICS",

    # ══════════════════════════════════════════════════════════════════════════
    # OPHTHALMOLOGY (207W*)
    # ══════════════════════════════════════════════════════════════════════════
    "207W00000X": "OPHTHALMOLOGY",
    "207WX0009X": "OPHTHALMOLOGY",
    "207WX0107X": "OPHTHALMOLOGY",
    "207WX0108X": "OPHTHALMOLOGY",
    "207WX0200X": "OPHTHALMOLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # PODIATRY (213E*)
    # ══════════════════════════════════════════════════════════════════════════
    "213E00000X": "PODIATRY",
    "213EG0000X": "PODIATRY",
    "213EP0504X": "PODIATRY",
    "213EP1101X": "PODIATRY",
    "213ES0000X": "PODIATRY",
    "213ES0103X": "PODIATRY",
    "213ES0131X": "PODIATRY",

    # ══════════════════════════════════════════════════════════════════════════
    # PHYSICAL MEDICINE & REHABILITATION (2081*)
    # ══════════════════════════════════════════════════════════════════════════
    "208100000X": "PHYSICAL_MEDICINE_REHAB",
    "2081H0002X": "PHYSICAL_MEDICINE_REHAB",
    "2081N0008X": "PHYSICAL_MEDICINE_REHAB",
    "2081P0004X": "PHYSICAL_MEDICINE_REHAB",
    "2081P0010X": "PHYSICAL_MEDICINE_REHAB",
    "2081P0301X": "PHYSICAL_MEDICINE_REHAB",
    "2081P2900X": "PHYSICAL_MEDICINE_REHAB",
    "2081S0010X": "PHYSICAL_MEDICINE_REHAB",

    # ══════════════════════════════════════════════════════════════════════════
    # GENERAL PRACTICE (208D*)
    # ══════════════════════════════════════════════════════════════════════════
    "208D00000X": "GENERAL_PRACTICE",

    # ══════════════════════════════════════════════════════════════════════════
    # PLASTIC SURGERY (2082*)
    # ══════════════════════════════════════════════════════════════════════════
    "208200000X": "PLASTIC_SURGERY",
    "2082S0099X": "PLASTIC_SURGERY",
    "2082S0105X": "PLASTIC_SURGERY",

    # ══════════════════════════════════════════════════════════════════════════
    # COLON & RECTAL SURGERY (208C*)
    # ══════════════════════════════════════════════════════════════════════════
    "208C00000X": "COLON_RECTAL_SURGERY",

    # ══════════════════════════════════════════════════════════════════════════
    # NUCLEAR MEDICINE (207U*)
    # ══════════════════════════════════════════════════════════════════════════
    "207U00000X": "NUCLEAR_MEDICINE",
    "207UN0901X": "NUCLEAR_MEDICINE",
    "207UN0903X": "NUCLEAR_MEDICINE",

    # ══════════════════════════════════════════════════════════════════════════
    # PREVENTIVE MEDICINE (2083*)
    # ══════════════════════════════════════════════════════════════════════════
    "2083A0100X": "PREVENTIVE_MEDICINE",
    "2083B0002X": "PREVENTIVE_MEDICINE",
    "2083C0008X": "PREVENTIVE_MEDICINE",
    "2083P0011X": "PREVENTIVE_MEDICINE",
    "2083P0500X": "PREVENTIVE_MEDICINE",
    "2083P0901X": "PREVENTIVE_MEDICINE",
    "2083S0010X": "PREVENTIVE_MEDICINE",
    "2083T0002X": "PREVENTIVE_MEDICINE",
    "2083X0100X": "PREVENTIVE_MEDICINE",

    # ══════════════════════════════════════════════════════════════════════════
    # COMMUNITY HEALTH (172*, 173*, 174*, 175*, 176*, 251*)
    # ══════════════════════════════════════════════════════════════════════════
    "172V00000X": "COMMUNITY_HEALTH",
    "173000000X": "COMMUNITY_HEALTH",
    "173C00000X": "COMMUNITY_HEALTH",
    "173F00000X": "COMMUNITY_HEALTH",
    "174200000X": "COMMUNITY_HEALTH",
    "174400000X": "COMMUNITY_HEALTH",
    "175F00000X": "COMMUNITY_HEALTH",
    "175L00000X": "COMMUNITY_HEALTH",
    "175M00000X": "COMMUNITY_HEALTH",
    "175T00000X": "COMMUNITY_HEALTH",
    "176P00000X": "COMMUNITY_HEALTH",
    "177F00000X": "COMMUNITY_HEALTH",
    "251B00000X": "COMMUNITY_HEALTH",
    "251C00000X": "COMMUNITY_HEALTH",
    "251F00000X": "COMMUNITY_HEALTH",
    "251J00000X": "COMMUNITY_HEALTH",
    "251K00000X": "COMMUNITY_HEALTH",
    "251S00000X": "COMMUNITY_HEALTH",
    "251T00000X": "COMMUNITY_HEALTH",
    "251V00000X": "COMMUNITY_HEALTH",
    "251X00000X": "COMMUNITY_HEALTH",

    # ══════════════════════════════════════════════════════════════════════════
    # HOME HEALTH (251E*)
    # ══════════════════════════════════════════════════════════════════════════
    "251E00000X": "HOME_HEALTH",

    # ══════════════════════════════════════════════════════════════════════════
    # HOSPICE/PALLIATIVE (251G*)
    # ══════════════════════════════════════════════════════════════════════════
    "251G00000X": "HOSPICE_PALLIATIVE",

    # ══════════════════════════════════════════════════════════════════════════
    # CLINIC/FACILITY (261Q*)
    # ══════════════════════════════════════════════════════════════════════════
    "261Q00000X": "CLINIC_FACILITY",
    "261QA0005X": "CLINIC_FACILITY",
    "261QA0006X": "CLINIC_FACILITY",
    "261QA0600X": "CLINIC_FACILITY",
    "261QA0900X": "CLINIC_FACILITY",
    "261QA1903X": "CLINIC_FACILITY",
    "261QA3000X": "CLINIC_FACILITY",
    "261QB0400X": "CLINIC_FACILITY",
    "261QC0050X": "CLINIC_FACILITY",
    "261QC1500X": "CLINIC_FACILITY",
    "261QC1800X": "CLINIC_FACILITY",
    "261QD0000X": "CLINIC_FACILITY",
    "261QD1600X": "CLINIC_FACILITY",
    "261QE0002X": "CLINIC_FACILITY",
    "261QE0800X": "CLINIC_FACILITY",
    "261QF0050X": "CLINIC_FACILITY",
    "261QF0400X": "CLINIC_FACILITY",
    "261QG0250X": "CLINIC_FACILITY",
    "261QH0100X": "CLINIC_FACILITY",
    "261QH0700X": "CLINIC_FACILITY",
    "261QI0500X": "CLINIC_FACILITY",
    "261QL0400X": "CLINIC_FACILITY",
    "261QM0801X": "CLINIC_FACILITY",
    "261QM0850X": "CLINIC_FACILITY",
    "261QM0855X": "CLINIC_FACILITY",
    "261QM1000X": "CLINIC_FACILITY",
    "261QM1100X": "CLINIC_FACILITY",
    "261QM1101X": "CLINIC_FACILITY",
    "261QM1102X": "CLINIC_FACILITY",
    "261QM1103X": "CLINIC_FACILITY",
    "261QM1200X": "CLINIC_FACILITY",
    "261QM1300X": "CLINIC_FACILITY",
    "261QM2500X": "CLINIC_FACILITY",
    "261QM2800X": "CLINIC_FACILITY",
    "261QM3000X": "CLINIC_FACILITY",
    "261QP0904X": "CLINIC_FACILITY",
    "261QP0905X": "CLINIC_FACILITY",
    "261QP1100X": "CLINIC_FACILITY",
    "261QP2000X": "CLINIC_FACILITY",
    "261QP2300X": "CLINIC_FACILITY",
    "261QP2400X": "CLINIC_FACILITY",
    "261QP3300X": "CLINIC_FACILITY",
    "261QR0200X": "CLINIC_FACILITY",
    "261QR0206X": "CLINIC_FACILITY",
    "261QR0207X": "CLINIC_FACILITY",
    "261QR0208X": "CLINIC_FACILITY",
    "261QR0400X": "CLINIC_FACILITY",
    "261QR0404X": "CLINIC_FACILITY",
    "261QR0405X": "CLINIC_FACILITY",
    "261QR0800X": "CLINIC_FACILITY",
    "261QR1100X": "CLINIC_FACILITY",
    "261QR1300X": "CLINIC_FACILITY",
    "261QS0112X": "CLINIC_FACILITY",
    "261QS0132X": "CLINIC_FACILITY",
    "261QS1000X": "CLINIC_FACILITY",
    "261QS1200X": "CLINIC_FACILITY",
    "261QU0200X": "CLINIC_FACILITY",
    "261QV0200X": "CLINIC_FACILITY",
    "261QX0100X": "CLINIC_FACILITY",
    "261QX0200X": "CLINIC_FACILITY",
    "261QX0203X": "CLINIC_FACILITY",

    # ══════════════════════════════════════════════════════════════════════════
    # HOSPITAL (273*, 275*, 276*, 281*, 282*, 283*, 284*, 286*)
    # ══════════════════════════════════════════════════════════════════════════
    "273100000X": "HOSPITAL",
    "273R00000X": "HOSPITAL",
    "273Y00000X": "HOSPITAL",
    "275N00000X": "HOSPITAL",
    "276400000X": "HOSPITAL",
    "281P00000X": "HOSPITAL",
    "281PC2000X": "HOSPITAL",
    "282E00000X": "HOSPITAL",
    "282J00000X": "HOSPITAL",
    "282N00000X": "HOSPITAL",
    "282NC0060X": "HOSPITAL",
    "282NC2000X": "HOSPITAL",
    "282NR1301X": "HOSPITAL",
    "282NW0100X": "HOSPITAL",
    "283Q00000X": "HOSPITAL",
    "283X00000X": "HOSPITAL",
    "283XC2000X": "HOSPITAL",
    "284300000X": "HOSPITAL",
    "286500000X": "HOSPITAL",
    "287300000X": "HOSPITAL",

    # ══════════════════════════════════════════════════════════════════════════
    # Skilled Nursing & Residential (311*, 313*, 314*, 315*, 317*, 320*, 322*, 323*, 324*, 331*, 332*, 333*, 341*, 343*, 385*, 390*)
    # ══════════════════════════════════════════════════════════════════════════
    "311500000X": "HOME_HEALTH",
    "311Z00000X": "HOME_HEALTH",
    "313M00000X": "HOME_HEALTH",
    "314000000X": "HOME_HEALTH",
    "315D00000X": "HOSPICE_PALLIATIVE",
    "315P00000X": "HOSPICE_PALLIATIVE",
    "317400000X": "HOME_HEALTH",
    "320600000X": "HOME_HEALTH",
    "320700000X": "HOME_HEALTH",
    "320800000X": "MENTAL_HEALTH",
    "320900000X": "MENTAL_HEALTH",
    "322D00000X": "HOME_HEALTH",
    "323P00000X": "MENTAL_HEALTH",
    "324500000X": "MENTAL_HEALTH",
    "331L00000X": "PHARMACY",
    "332000000X": "PHARMACY",
    "332100000X": "PHARMACY",
    "332800000X": "PHARMACY",
    "332900000X": "PHARMACY",
    "332G00000X": "PHARMACY",
    "332H00000X": "PHARMACY",
    "332S00000X": "PHARMACY",
    "332U00000X": "PHARMACY",
    "333300000X": "PHARMACY",
    "333600000X": "PHARMACY",
    "341600000X": "CLINIC_FACILITY",
    "341800000X": "CLINIC_FACILITY",
    "343800000X": "CLINIC_FACILITY",
    "343900000X": "CLINIC_FACILITY",
    "344600000X": "CLINIC_FACILITY",
    "344800000X": "CLINIC_FACILITY",
    "347B00000X": "CLINIC_FACILITY",
    "347C00000X": "CLINIC_FACILITY",
    "347D00000X": "CLINIC_FACILITY",
    "347E00000X": "CLINIC_FACILITY",
    "385H00000X": "CLINIC_FACILITY",
    "385HR2050X": "CLINIC_FACILITY",
    "385HR2055X": "CLINIC_FACILITY",
    "385HR2060X": "CLINIC_FACILITY",
    "385HR2065X": "CLINIC_FACILITY",
    "385HR2070X": "CLINIC_FACILITY",
    "385HR2075X": "CLINIC_FACILITY",
    "390200000X": "CLINIC_FACILITY",
    "405300000X": "OTHER",

    # ══════════════════════════════════════════════════════════════════════════
    # Group Practice (193*, 291*, 292*, 293*)
    # ══════════════════════════════════════════════════════════════════════════
    "193200000X": "CLINIC_FACILITY",
    "193400000X": "CLINIC_FACILITY",
    "291900000X": "LAB_PATHOLOGY",
    "291U00000X": "LAB_PATHOLOGY",
    "292200000X": "LAB_PATHOLOGY",
    "293D00000X": "LAB_PATHOLOGY",

    # ══════════════════════════════════════════════════════════════════════════
    # Medical Technicians (24*, 246*, 247*)
    # ══════════════════════════════════════════════════════════════════════════
    "246QB0000X": "LAB_PATHOLOGY",
    "246QC1000X": "LAB_PATHOLOGY",
    "246QC2700X": "LAB_PATHOLOGY",
    "246QH0000X": "LAB_PATHOLOGY",
    "246QH0401X": "LAB_PATHOLOGY",
    "246QH0600X": "LAB_PATHOLOGY",
    "246QI0000X": "LAB_PATHOLOGY",
    "246QL0900X": "LAB_PATHOLOGY",
    "246QL0901X": "LAB_PATHOLOGY",
    "246QM0706X": "LAB_PATHOLOGY",
    "246QM0900X": "LAB_PATHOLOGY",
    "247000000X": "LAB_PATHOLOGY",
    "2470A2800X": "LAB_PATHOLOGY",
    "247100000X": "RADIOLOGY",
    "2471B0102X": "RADIOLOGY",
    "2471C1101X": "RADIOLOGY",
    "2471C1106X": "RADIOLOGY",
    "2471C3401X": "RADIOLOGY",
    "2471C3402X": "RADIOLOGY",
    "2471M1202X": "RADIOLOGY",
    "2471M2300X": "RADIOLOGY",
    "2471N0900X": "RADIOLOGY",
    "2471Q0001X": "RADIOLOGY",
    "2471R0002X": "RADIOLOGY",
    "2471S1302X": "RADIOLOGY",
    "2471V0105X": "RADIOLOGY",
    "2471V0106X": "RADIOLOGY",
    "247200000X": "OTHER",

    # ══════════════════════════════════════════════════════════════════════════
    # Behavioral Health Day Programs (373*)
    # ══════════════════════════════════════════════════════════════════════════
    "373H00000X": "MENTAL_HEALTH",

    # ══════════════════════════════════════════════════════════════════════════
    # Other/Catch-all
    # ══════════════════════════════════════════════════════════════════════════
}


# ══════════════════════════════════════════════════════════════════════════════
# Prefix fallback — (prefix, category)
#
# Listed by domain, not by length. The classifier sorts this by descending
# prefix length before use, so "207RH0003" always beats "207R".
# ══════════════════════════════════════════════════════════════════════════════

PREFIX_MAPPINGS: list[tuple[str, str]] = [
    # ── Internal medicine & clinic subspecialties (9 chars) ──────────────────
    ("207RH0003", "ONCOLOGY"),
    ("207RG0100", "GASTROENTEROLOGY"),
    ("207RI0200", "INFECTIOUS_DISEASE"),
    ("207RI0011", "ENDOCRINOLOGY"),
    ("261QE0700", "ENDOCRINOLOGY"),
    ("261QR0401", "RHEUMATOLOGY"),
    ("207RG0300", "GERIATRICS"),
    # ── Subspecialty families (5–6 chars) ────────────────────────────────────
    ("247100", "RADIOLOGY"),
    ("207RC", "CARDIOLOGY"),
    ("2084N", "NEUROLOGY"),
    ("207RX", "ONCOLOGY"),
    ("207RP", "PULMONOLOGY"),
    ("207RN", "NEPHROLOGY"),
    ("207RE", "ENDOCRINOLOGY"),
    ("207RR", "RHEUMATOLOGY"),
    ("207QG", "GERIATRICS"),
    # ── Behavioral health ────────────────────────────────────────────────────
    ("101Y", "MENTAL_HEALTH"),
    ("103", "PSYCHOLOGY"),
    ("104", "SOCIAL_WORK"),
    ("106", "MENTAL_HEALTH"),
    ("2084", "PSYCHIATRY"),
    ("373", "MENTAL_HEALTH"),
    # ── Nursing & mid-level providers ────────────────────────────────────────
    ("163W", "NURSING"),
    ("164", "NURSING"),
    ("363L", "NURSE_PRACTITIONER"),
    ("363A", "PHYSICIAN_ASSISTANT"),
    # ── Dental & vision ──────────────────────────────────────────────────────
    ("122", "DENTISTRY"),
    ("124", "DENTISTRY"),
    ("125", "DENTISTRY"),
    ("126", "DENTISTRY"),
    ("152W", "OPTOMETRY"),
    ("156", "OPTOMETRY"),
    # ── Pharmacy ─────────────────────────────────────────────────────────────
    ("183", "PHARMACY"),
    ("331", "PHARMACY"),
    ("332", "PHARMACY"),
    ("333", "PHARMACY"),
    # ── Therapy services ─────────────────────────────────────────────────────
    ("2251", "PHYSICAL_THERAPY"),
    ("2252", "PHYSICAL_THERAPY"),
    ("225X", "OCCUPATIONAL_THERAPY"),
    ("224Z", "OCCUPATIONAL_THERAPY"),
    ("2257", "SPEECH_THERAPY"),
    ("235", "SPEECH_THERAPY"),
    ("237", "SPEECH_THERAPY"),
    ("367", "RESPIRATORY_THERAPY"),
    ("111N", "CHIROPRACTIC"),
    ("1711", "ACUPUNCTURE"),
    # ── Physician specialties (4 chars) ──────────────────────────────────────
    ("207P", "EMERGENCY_MEDICINE"),
    ("2080", "PEDIATRICS"),
    ("207L", "ANESTHESIOLOGY"),
    ("2086", "SURGERY"),
    ("208G", "SURGERY"),
    ("207V", "OB_GYN"),
    ("2085", "RADIOLOGY"),
    ("207N", "DERMATOLOGY"),
    ("2088", "UROLOGY"),
    ("207K", "ALLERGY_IMMUNOLOGY"),
    ("207Z", "PATHOLOGY"),
    ("207X", "ORTHOPEDICS"),
    ("207Q", "FAMILY_MEDICINE"),
    ("207R", "INTERNAL_MEDICINE"),
    ("207W", "OPHTHALMOLOGY"),
    ("213E", "PODIATRY"),
    ("2081", "PHYSICAL_MEDICINE_REHAB"),
    ("208D", "GENERAL_PRACTICE"),
    ("2082", "PLASTIC_SURGERY"),
    ("208C", "COLON_RECTAL_SURGERY"),
    ("207U", "NUCLEAR_MEDICINE"),
    ("2083", "PREVENTIVE_MEDICINE"),
    # ── Support services ─────────────────────────────────────────────────────
    ("133", "DIETETICS"),
    ("136", "DIETETICS"),
    ("374", "LAB_PATHOLOGY"),
    ("246", "LAB_PATHOLOGY"),
    ("247", "LAB_PATHOLOGY"),
    ("291", "LAB_PATHOLOGY"),
    ("292", "LAB_PATHOLOGY"),
    ("293", "LAB_PATHOLOGY"),
    ("310", "DME_PROSTHETICS"),
    ("332B", "DME_PROSTHETICS"),
    ("335", "DME_PROSTHETICS"),
    ("172V", "COMMUNITY_HEALTH"),
    ("251", "COMMUNITY_HEALTH"),
    ("171M", "MIDWIFERY"),
    ("176B", "MIDWIFERY"),
    ("315", "HOSPICE_PALLIATIVE"),
    # ── Facilities ───────────────────────────────────────────────────────────
    ("261Q", "CLINIC_FACILITY"),
    ("193", "CLINIC_FACILITY"),
    ("390", "CLINIC_FACILITY"),
    ("27", "HOSPITAL"),
    ("28", "HOSPITAL"),
    ("31", "HOME_HEALTH"),
]


# ══════════════════════════════════════════════════════════════════════════════
# Exact code → human-readable description (common codes only)
#
# Codes missing here fall back to the title-cased category label.
# ══════════════════════════════════════════════════════════════════════════════

TAXONOMY_DESCRIPTIONS: dict[str, str] = {
    # Internal Medicine & Subspecialties
    "207R00000X": "Internal Medicine",
    "207RA0000X": "Adolescent Medicine",
    "207RA0001X": "Advanced Heart Failure & Transplant Cardiology",
    "207RC0000X": "Cardiovascular Disease",
    "207RC0001X": "Clinical Cardiac Electrophysiology",
    "207RC0200X": "Critical Care Medicine",
    "207RE0101X": "Endocrinology, Diabetes & Metabolism",
    "207RG0100X": "Gastroenterology",
    "207RG0300X": "Geriatric Medicine",
    "207RH0000X": "Hematology",
    "207RH0003X": "Hematology & Oncology",
    "207RI0001X": "Interventional Cardiology",
    "207RI0008X": "Hepatology",
    "207RI0011X": "Endocrinology",
    "207RI0200X": "Infectious Disease",
    "207RM1200X": "Magnetic Resonance Imaging",
    "207RN0300X": "Nephrology",
    "207RP1001X": "Pulmonary Disease",
    "207RR0500X": "Rheumatology",
    "207RX0202X": "Medical Oncology",
    "207RY0107X": "Adult Congenital Heart Disease",

    # Family Medicine
    "207Q00000X": "Family Medicine",
    "207QA0000X": "Family Medicine - Adolescent Medicine",
    "207QA0401X": "Family Medicine - Addiction Medicine",
    "207QA0505X": "Family Medicine - Adult Medicine",
    "207QB0002X": "Family Medicine - Obesity Medicine",
    "207QG0300X": "Geriatric Medicine",
    "207QH0002X": "Hospice & Palliative Medicine",
    "207QS0010X": "Family Medicine - Sports Medicine",

    # General Practice
    "208D00000X": "General Practice",

    # Emergency Medicine
    "207P00000X": "Emergency Medicine",
    "207PE0004X": "Emergency Medical Services",
    "207PP0204X": "Pediatric Emergency Medicine",
    "207PS0010X": "Emergency Medicine - Sports Medicine",

    # Pediatrics
    "208000000X": "Pediatrics",
    "2080A0000X": "Pediatrics - Adolescent Medicine",
    "2080C0008X": "Pediatrics - Child Abuse Pediatrics",
    "2080N0001X": "Neonatal-Perinatal Medicine",
    "2080P0006X": "Developmental-Behavioral Pediatrics",
    "2080P0201X": "Pediatric Allergy & Immunology",
    "2080P0202X": "Pediatric Cardiology",
    "2080P0203X": "Pediatric Critical Care",
    "2080P0205X": "Pediatric Endocrinology",
    "2080P0206X": "Pediatric Gastroenterology",
    "2080P0207X": "Pediatric Hematology-Oncology",
    "2080P0210X": "Pediatric Nephrology",
    "2080P0214X": "Pediatric Pulmonology",

    # Surgery
    "208600000X": "Surgery",
    "2086S0102X": "Surgical Critical Care",
    "2086S0105X": "Surgery of the Hand",
    "2086S0120X": "Pediatric Surgery",
    "2086S0122X": "Plastic & Reconstructive Surgery",
    "2086S0127X": "Trauma Surgery",
    "2086S0129X": "Vascular Surgery",
    "2086X0206X": "Surgical Oncology",
    "208G00000X": "Thoracic Surgery",
    "208M00000X": "Hospitalist",
    "208VP0000X": "Pain Medicine",
    "208VP0014X": "Interventional Pain Medicine",

    # Orthopedics
    "207X00000X": "Orthopaedic Surgery",
    "207XS0106X": "Hand Surgery",
    "207XS0114X": "Adult Reconstructive Orthopaedic Surgery",
    "207XS0117X": "Orthopaedic Spine Surgery",
    "207XX0004X": "Orthopaedic Foot & Ankle Surgery",
    "207XX0005X": "Sports Medicine",
    "207XX0801X": "Orthopaedic Trauma",

    # OB/GYN
    "207V00000X": "Obstetrics & Gynecology",
    "207VE0102X": "Reproductive Endocrinology",
    "207VG0400X": "Gynecology",
    "207VM0101X": "Maternal & Fetal Medicine",
    "207VX0000X": "Obstetrics",
    "207VX0201X": "Gynecologic Oncology",

    # Ophthalmology
    "207W00000X": "Ophthalmology",
    "207WX0009X": "Glaucoma Specialist",
    "207WX0107X": "Retinal Specialist",
    "207WX0200X": "Ophthalmic Plastic & Reconstructive Surgery",

    # Dermatology
    "207N00000X": "Dermatology",
    "207ND0101X": "MOHS Micrographic Surgery",
    "207ND0900X": "Dermatopathology",
    "207NP0225X": "Pediatric Dermatology",

    # Neurology & Psychiatry
    "2084N0400X": "Neurology",
    "2084N0402X": "Child Neurology",
    "2084N0600X": "Clinical Neurophysiology",
    "2084P0800X": "Psychiatry",
    "2084P0802X": "Addiction Psychiatry",
    "2084P0804X": "Child & Adolescent Psychiatry",
    "2084P0805X": "Geriatric Psychiatry",
    "2084A0401X": "Psychiatry - Addiction Medicine",
    "2084S0012X": "Sleep Medicine",

    # Radiology
    "2085R0202X": "Diagnostic Radiology",
    "2085R0001X": "Radiation Oncology",
    "2085R0204X": "Vascular & Interventional Radiology",
    "2085N0700X": "Neuroradiology",
    "2085P0229X": "Pediatric Radiology",

    # Anesthesiology
    "207L00000X": "Anesthesiology",
    "207LC0200X": "Anesthesiology - Critical Care",
    "207LP2900X": "Anesthesiology - Pain Medicine",

    # Urology
    "208800000X": "Urology",
    "2088P0231X": "Pediatric Urology",

    # Allergy & Immunology
    "207K00000X": "Allergy & Immunology",

    # Pathology
    "207ZP0101X": "Anatomic Pathology",
    "207ZP0102X": "Anatomic & Clinical Pathology",
    "207ZC0006X": "Clinical Pathology",

    # Podiatry
    "213E00000X": "Podiatrist",
    "213EG0000X": "Podiatrist - General Practice",
    "213ES0103X": "Podiatrist - Foot & Ankle Surgery",
    "213ES0131X": "Podiatrist - Foot Surgery",

    # Physical Medicine & Rehabilitation
    "208100000X": "Physical Medicine & Rehabilitation",
    "2081P2900X": "PM&R - Pain Medicine",
    "2081S0010X": "PM&R - Sports Medicine",

    # Plastic Surgery
    "208200000X": "Plastic Surgery",

    # Colon & Rectal Surgery
    "208C00000X": "Colon & Rectal Surgery",

    # Nuclear Medicine
    "207U00000X": "Nuclear Medicine",

    # Preventive Medicine
    "2083P0500X": "Preventive Medicine",
    "2083P0901X": "Public Health & General Preventive Medicine",
    "2083X0100X": "Occupational Medicine",

    # Psychiatry, Psychology & Mental Health
    "103T00000X": "Psychologist",
    "103TC0700X": "Clinical Psychologist",
    "103TC1900X": "Counseling Psychologist",
    "103TH0100X": "Health Service Psychologist",
    "103TS0200X": "School Psychologist",
    "103G00000X": "Clinical Neuropsychologist",
    "101Y00000X": "Counselor",
    "101YM0800X": "Mental Health Counselor",
    "101YA0400X": "Addiction Counselor",
    "104100000X": "Social Worker",
    "1041C0700X": "Licensed Clinical Social Worker",
    "106H00000X": "Marriage & Family Therapist",
    "103K00000X": "Behavioral Analyst",

    # Nursing
    "163W00000X": "Registered Nurse",
    "163WP0808X": "Psychiatric/Mental Health Nurse",
    "163WP0200X": "Pediatric Nurse",
    "163WC0200X": "Critical Care Nurse",
    "163WE0003X": "Emergency Nurse",
    "163WG0600X": "Gerontology Nurse",
    "164W00000X": "Licensed Practical Nurse",
    "164X00000X": "Licensed Vocational Nurse",

    # Nurse Practitioner
    "363L00000X": "Nurse Practitioner",
    "363LA2100X": "Nurse Practitioner - Acute Care",
    "363LA2200X": "Nurse Practitioner - Adult Health",
    "363LC0200X": "Nurse Practitioner - Critical Care",
    "363LF0000X": "Nurse Practitioner - Family",
    "363LG0600X": "Nurse Practitioner - Gerontology",
    "363LN0000X": "Nurse Practitioner - Neonatal",
    "363LP0200X": "Nurse Practitioner - Pediatrics",
    "363LP0808X": "Nurse Practitioner - Psychiatric/Mental Health",
    "363LP2300X": "Nurse Practitioner - Primary Care",
    "363LW0102X": "Nurse Practitioner - Women's Health",
    "363LX0001X": "Nurse Practitioner - OB/GYN",

    # Physician Assistant
    "363A00000X": "Physician Assistant",
    "363AS0400X": "Physician Assistant - Surgical",

    # CRNA & Midwifery
    "367H00000X": "Anesthesiologist Assistant",
    "171M00000X": "Midwife",
    "176B00000X": "Certified Nurse Midwife",

    # Dentistry
    "122300000X": "Dentist",
    "1223G0001X": "General Practice Dentist",
    "1223E0200X": "Endodontist",
    "1223P0106X": "Oral & Maxillofacial Pathologist",
    "1223P0221X": "Pediatric Dentist",
    "1223P0300X": "Periodontist",
    "1223P0700X": "Prosthodontist",
    "1223S0112X": "Oral & Maxillofacial Surgeon",
    "1223X0400X": "Orthodontist",
    "124Q00000X": "Dental Hygienist",

    # Optometry
    "152W00000X": "Optometrist",
    "152WP0200X": "Optometrist - Pediatrics",

    # Pharmacy
    "183500000X": "Pharmacist",
    "1835G0000X": "Pharmacist - General Practice",
    "183700000X": "Pharmacy Technician",

    # Physical Therapy
    "225100000X": "Physical Therapist",
    "2251X0800X": "Physical Therapist - Orthopedic",
    "2251S0007X": "Physical Therapist - Sports",
    "2251N0400X": "Physical Therapist - Neurology",
    "225200000X": "Physical Therapy Assistant",

    # Occupational Therapy
    "225X00000X": "Occupational Therapist",
    "225XH1200X": "Occupational Therapist - Hand",
    "225XP0200X": "Occupational Therapist - Pediatrics",
    "224Z00000X": "Occupational Therapy Assistant",

    # Speech & Hearing
    "235Z00000X": "Speech-Language Pathologist",
    "237600000X": "Audiologist",

    # Respiratory Therapy
    "227800000X": "Respiratory Therapist",
    "227900000X": "Respiratory Therapist",
    "367500000X": "Respiratory Therapist",

    # Chiropractic & Acupuncture
    "111N00000X": "Chiropractor",
    "171100000X": "Acupuncturist",

    # Dietetics
    "133V00000X": "Registered Dietitian",
    "133N00000X": "Nutritionist",

    # Lab & DME
    "3747P1801X": "Phlebotomy Technician",
    "332B00000X": "Durable Medical Equipment",
    "172V00000X": "Community Health Worker",

    # Facilities
    "261Q00000X": "Clinic/Center",
    "261QP2300X": "Primary Care Clinic",
    "261QU0200X": "Urgent Care Clinic",
    "261QM0801X": "Mental Health Clinic",
    "261QF0400X": "Federally Qualified Health Center",
    "282N00000X": "General Acute Care Hospital",
    "283Q00000X": "Psychiatric Hospital",
    "283X00000X": "Rehabilitation Hospital",
    "314000000X": "Skilled Nursing Facility",
}
