"""Standard customs clearance charges offered as line-item descriptions."""

SERVICE_TEMPLATES = (
    ("Delivery Order", "اذن تسليم"),
    ("Customs Duty", "رسوم جمركية"),
    ("Stevedoring Charges", "اجور مناولة الميناء"),
    ("Global Charges", "اجور جلوبال"),
    ("Freight Charges", "اجور شحن"),
    ("Handling Charges KAC", "رسوم خدمات كويتية وناشيونال"),
    ("Port Demurrage", "ارضية الميناء"),
    ("Ship Agent Demurrage", "ارضية وكيل الملاحة"),
    ("Municipality Charges", "اجور متابعة البلدية"),
    ("Customs Inspection Fees", "كشف وتفتيش جمركي"),
    ("Transport Charges", "اجور نقل"),
    ("Labour/Packing Charges", "اجور عمال / تغليف وتربيط"),
    ("Agriculture", "اجور افراجات زراعية"),
    ("Delivery Good Service", "اجور استلام"),
    ("Forklift/Crane Charges", "اجور رافعة كرين"),
    ("Authorities/Certificates Releases", "افراجات حكومية (تجارة وبلدية)"),
    ("Customs Clearing Charges", "اجور تخليص"),
    ("Delivery Policy Charges", "اجور استلام بوليصة"),
    ("Bank Commissions", "عمولة بنكية"),
    ("Printing/Copy", "طباعة / تصوير"),
    ("Stamping Foreign Affairs", "تصديق وزارة الخارجية"),
    ("Computer Description", "بيان كمبيوتر"),
    ("Other Expenses", "مصروفات اخرى"),
)


def list_service_templates() -> list[dict]:
    return [{"description_en": en, "description_ar": ar} for en, ar in SERVICE_TEMPLATES]
