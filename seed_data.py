"""
Seed Catalog
Curated, version-controlled peptide records used for bulk ingestion
"""

from dataclasses import dataclass, field
from typing import Tuple
import enum

from models import DosingContext, EvidenceGrade, JurisdictionCode, RegulatoryStatusValue


class StatusModel(enum.Enum):
    """How a peptide's regulatory status spreads across jurisdictions"""
    APPROVED_GLOBAL = "approved_global"
    INVESTIGATIONAL_ALL = "investigational_all"
    NON_US_APPROVED_ONLY = "non_us_approved_only"


# Fixed jurisdiction list, in ingestion order
JURISDICTIONS = (
    (JurisdictionCode.US, "United States"),
    (JurisdictionCode.EU, "European Union"),
    (JurisdictionCode.UK, "United Kingdom"),
    (JurisdictionCode.CA, "Canada"),
    (JurisdictionCode.AU, "Australia"),
)


def status_for_jurisdiction(model: StatusModel, code: JurisdictionCode) -> RegulatoryStatusValue:
    """Regulatory status implied by a status model in one jurisdiction"""
    if model is StatusModel.INVESTIGATIONAL_ALL:
        return RegulatoryStatusValue.INVESTIGATIONAL
    if model is StatusModel.NON_US_APPROVED_ONLY:
        if code is JurisdictionCode.US:
            return RegulatoryStatusValue.INVESTIGATIONAL
        return RegulatoryStatusValue.NON_US_APPROVED
    if code is JurisdictionCode.US:
        return RegulatoryStatusValue.US_FDA_APPROVED
    return RegulatoryStatusValue.NON_US_APPROVED


@dataclass(frozen=True)
class UseCaseSeed:
    slug: str
    name: str
    evidence_grade: EvidenceGrade
    consumer_summary: str
    clinical_summary: str


@dataclass(frozen=True)
class DosingSeed:
    context: DosingContext
    population: str
    route: str
    starting_dose: str
    maintenance_dose: str
    frequency: str
    notes: str


@dataclass(frozen=True)
class SafetySeed:
    adverse_effects: str
    contraindications: str
    interactions: str
    monitoring: str


@dataclass(frozen=True)
class ClaimSeed:
    section: str
    claim_text: str
    evidence_grade: EvidenceGrade
    source_url: str
    source_title: str
    published_at: str  # ISO date


@dataclass(frozen=True)
class PeptideSeed:
    slug: str
    name: str
    peptide_class: str
    status_model: StatusModel
    intro: str
    mechanism: str
    effectiveness_summary: str
    long_description: str
    use_case: UseCaseSeed
    dosing: DosingSeed
    safety: SafetySeed
    claim: ClaimSeed
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict) -> "PeptideSeed":
        """Build a seed from the plain dict layout used in SEED_RECORDS"""
        use_case = dict(data["use_case"])
        dosing = dict(data["dosing"])
        claim = dict(data["claim"])
        return cls(
            slug=data["slug"],
            name=data["name"],
            peptide_class=data["peptide_class"],
            status_model=StatusModel(data["status_model"]),
            intro=data["intro"],
            mechanism=data["mechanism"],
            effectiveness_summary=data["effectiveness_summary"],
            long_description=data["long_description"],
            use_case=UseCaseSeed(**{**use_case, "evidence_grade": EvidenceGrade(use_case["evidence_grade"])}),
            dosing=DosingSeed(**{**dosing, "context": DosingContext(dosing["context"])}),
            safety=SafetySeed(**data["safety"]),
            claim=ClaimSeed(**{**claim, "evidence_grade": EvidenceGrade(claim["evidence_grade"])}),
            aliases=tuple(data.get("aliases", ())),
        )


FDA_LABEL_SOURCE = "https://open.fda.gov/apis/drug/label/"
TRIALS_SOURCE = "https://clinicaltrials.gov/data-api/api"

INVESTIGATIONAL_NOTE = "Investigational context only and not treatment guidance."


SEED_RECORDS = [
    # GLP-1 and incretin agonists
    {
        "slug": "semaglutide",
        "name": "Semaglutide",
        "peptide_class": "GLP-1 receptor agonist peptide",
        "status_model": "approved_global",
        "intro": "Semaglutide is a GLP-1 analog used for glycemic control and chronic weight management in indicated adults.",
        "mechanism": "Activates GLP-1 receptors to raise glucose dependent insulin secretion, lower glucagon, slow gastric emptying and increase satiety.",
        "effectiveness_summary": "Large randomized trials support clinically meaningful glycemic and weight outcomes in approved populations.",
        "long_description": (
            "Semaglutide is a once weekly GLP-1 receptor agonist with mature outcome data in type 2 diabetes "
            "and chronic weight management. Benefits include A1c reduction, sustained weight change and "
            "cardiometabolic improvements when paired with lifestyle care. Gastrointestinal effects during dose "
            "escalation are the main tolerability limit, so gradual titration and adherence counseling matter."
        ),
        "use_case": {
            "slug": "weight-management",
            "name": "Weight Management",
            "evidence_grade": "A",
            "consumer_summary": "Consistent studies show meaningful benefit in indicated obesity and metabolic risk groups.",
            "clinical_summary": "Robust RCT evidence with clinically relevant endpoints and reproducible effect sizes.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults with approved indication",
            "route": "Subcutaneous",
            "starting_dose": "Low initial dose per approved label",
            "maintenance_dose": "Escalate to labeled target dose",
            "frequency": "Weekly",
            "notes": "Follow the product label for titration and interruption guidance.",
        },
        "safety": {
            "adverse_effects": "Nausea, vomiting, constipation and reduced appetite are common during escalation.",
            "contraindications": "Avoid in labeled contraindicated populations; review endocrine history.",
            "interactions": "Review concurrent glucose lowering therapy and absorption effects of delayed gastric emptying.",
            "monitoring": "Track tolerability, adherence, weight trend, glycemic response and symptom flags.",
        },
        "claim": {
            "section": "Effectiveness",
            "claim_text": "Randomized trials demonstrate clinically meaningful weight and glycemic improvements in approved populations.",
            "evidence_grade": "A",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2024-01-15",
        },
        "aliases": ["Ozempic", "Wegovy", "Rybelsus"],
    },
    {
        "slug": "tirzepatide",
        "name": "Tirzepatide",
        "peptide_class": "Dual GIP and GLP-1 receptor agonist peptide",
        "status_model": "approved_global",
        "intro": "Tirzepatide is a dual incretin peptide used for glycemic and chronic weight management in indicated groups.",
        "mechanism": "Co-activates GIP and GLP-1 receptors, amplifying satiety and insulinotropic effects while reducing glucagon output.",
        "effectiveness_summary": "Strong evidence for substantial weight and glycemic reductions compared with older comparators.",
        "long_description": (
            "Tirzepatide targets both GIP and GLP-1 pathways and shows strong efficacy across metabolic endpoints "
            "in indicated adults. Comparative trials report robust A1c reduction and pronounced weight change, "
            "with durability tied to continued treatment. Early gastrointestinal symptoms drive most "
            "discontinuation, so escalation pacing and expectation setting are clinically important."
        ),
        "use_case": {
            "slug": "type-2-diabetes",
            "name": "Type 2 Diabetes",
            "evidence_grade": "A",
            "consumer_summary": "Major trials show strong blood glucose and weight benefits in indicated adults.",
            "clinical_summary": "Multicenter RCTs with reproducible superiority across key metabolic endpoints.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults with approved indication",
            "route": "Subcutaneous",
            "starting_dose": "Label defined low starting dose",
            "maintenance_dose": "Escalate by label increments to tolerated target",
            "frequency": "Weekly",
            "notes": "Exact dosing and escalation depend on the approved product label.",
        },
        "safety": {
            "adverse_effects": "Gastrointestinal effects are frequent early in treatment and during escalation.",
            "contraindications": "Screen for contraindications and caution factors from current labeling.",
            "interactions": "Adjust concomitant glucose lowering agents to reduce hypoglycemia risk.",
            "monitoring": "Monitor response, tolerability, hydration status and persistence.",
        },
        "claim": {
            "section": "Effectiveness",
            "claim_text": "Head to head trials show greater weight reduction than earlier GLP-1 comparators in indicated adults.",
            "evidence_grade": "A",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2024-03-01",
        },
        "aliases": ["Mounjaro", "Zepbound"],
    },
    {
        "slug": "liraglutide",
        "name": "Liraglutide",
        "peptide_class": "GLP-1 receptor agonist peptide",
        "status_model": "approved_global",
        "intro": "Liraglutide is a daily GLP-1 analog used in approved diabetes and weight related indications.",
        "mechanism": "Activates GLP-1 receptors to increase glucose dependent insulin response, reduce glucagon and enhance satiety.",
        "effectiveness_summary": "Strong evidence supports benefit in approved indications, dependent on continued therapy.",
        "long_description": (
            "Liraglutide has one of the longest post marketing records in the GLP-1 class and remains relevant "
            "where daily dosing is acceptable. Trial data support improvements in glycemic control and body weight, "
            "though effect sizes are generally smaller than newer weekly options."
        ),
        "use_case": {
            "slug": "type-2-diabetes",
            "name": "Type 2 Diabetes",
            "evidence_grade": "A",
            "consumer_summary": "Long term evidence supports glucose and weight benefits in indicated adults.",
            "clinical_summary": "Mature evidence base with consistent endpoint improvement and extensive safety follow up.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults with approved indication",
            "route": "Subcutaneous",
            "starting_dose": "Daily low starting dose per label",
            "maintenance_dose": "Escalate to labeled daily target",
            "frequency": "Daily",
            "notes": "Use the product specific titration schedule from the label.",
        },
        "safety": {
            "adverse_effects": "Nausea and other gastrointestinal effects are common early in therapy.",
            "contraindications": "Review labeled endocrine and hypersensitivity contraindications.",
            "interactions": "Assess interactions with other diabetes drugs; monitor hypoglycemia risk.",
            "monitoring": "Monitor glycemic endpoints, weight response and tolerability.",
        },
        "claim": {
            "section": "Effectiveness",
            "claim_text": "Clinical trials consistently show meaningful glycemic control improvements in indicated populations.",
            "evidence_grade": "A",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2023-09-10",
        },
        "aliases": ["Victoza", "Saxenda"],
    },
    {
        "slug": "dulaglutide",
        "name": "Dulaglutide",
        "peptide_class": "Long acting GLP-1 receptor agonist peptide",
        "status_model": "approved_global",
        "intro": "Dulaglutide is a weekly GLP-1 receptor agonist used for approved diabetes management pathways.",
        "mechanism": "Activates GLP-1 receptors to improve glucose dependent insulin release and reduce glucagon signaling.",
        "effectiveness_summary": "Evidence supports reliable A1c reduction with weekly administration and acceptable durability.",
        "long_description": (
            "Dulaglutide is a once weekly GLP-1 option with strong glycemic endpoint data in type 2 diabetes. "
            "The weekly schedule helps patients who struggle with daily injections, while gastrointestinal "
            "effects and contraindication review follow the usual class pattern."
        ),
        "use_case": {
            "slug": "type-2-diabetes",
            "name": "Type 2 Diabetes",
            "evidence_grade": "A",
            "consumer_summary": "Weekly treatment can improve blood sugar outcomes with strong supporting trial evidence.",
            "clinical_summary": "Large studies demonstrate consistent glycemic benefit with a class typical tolerability profile.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults with approved indication",
            "route": "Subcutaneous",
            "starting_dose": "Weekly label starting dose",
            "maintenance_dose": "Escalate to label based weekly maintenance",
            "frequency": "Weekly",
            "notes": "Follow the product label for escalation and missed dose handling.",
        },
        "safety": {
            "adverse_effects": "Gastrointestinal adverse events remain the most common class issue.",
            "contraindications": "Use only after contraindication screening per approved labeling.",
            "interactions": "Review glucose lowering co-therapy and delayed gastric emptying considerations.",
            "monitoring": "Assess A1c trend, body weight and tolerability over follow up.",
        },
        "claim": {
            "section": "Effectiveness",
            "claim_text": "Weekly dulaglutide has consistent randomized trial evidence for improved glycemic control.",
            "evidence_grade": "A",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2023-11-05",
        },
        "aliases": ["Trulicity"],
    },
    {
        "slug": "exenatide",
        "name": "Exenatide",
        "peptide_class": "GLP-1 receptor agonist peptide",
        "status_model": "approved_global",
        "intro": "Exenatide is an earlier GLP-1 analog with approved use in type 2 diabetes care.",
        "mechanism": "Stimulates GLP-1 receptors to support glucose dependent insulin activity and appetite regulation.",
        "effectiveness_summary": "Supports glycemic benefit, though efficacy and convenience trail newer incretin options.",
        "long_description": (
            "Exenatide established early proof of clinical utility for GLP-1 based diabetes care. It gives "
            "meaningful glycemic benefit and modest weight support, but treatment burden and comparative "
            "efficacy have shifted many patients toward newer agents."
        ),
        "use_case": {
            "slug": "type-2-diabetes",
            "name": "Type 2 Diabetes",
            "evidence_grade": "B",
            "consumer_summary": "Improves glucose control, although newer alternatives may offer stronger outcomes.",
            "clinical_summary": "Established efficacy with mature data; comparative performance varies against newer agents.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults with approved indication",
            "route": "Subcutaneous",
            "starting_dose": "Label low starting regimen",
            "maintenance_dose": "Escalate per product formulation label",
            "frequency": "Twice daily or weekly formulation dependent",
            "notes": "Frequency depends on immediate release versus extended release formulation.",
        },
        "safety": {
            "adverse_effects": "Gastrointestinal symptoms are common during initiation and dose escalation.",
            "contraindications": "Review product specific contraindications and renal use considerations.",
            "interactions": "Consider timing with oral medications due to gastric emptying effects.",
            "monitoring": "Track glycemic outcomes, tolerability and persistence.",
        },
        "claim": {
            "section": "Effectiveness",
            "claim_text": "Clinical programs demonstrate improved glycemic outcomes in adults with type 2 diabetes.",
            "evidence_grade": "B",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2022-12-20",
        },
        "aliases": ["Byetta", "Bydureon"],
    },
    # Somatostatin analogs
    {
        "slug": "octreotide",
        "name": "Octreotide",
        "peptide_class": "Somatostatin analog peptide",
        "status_model": "approved_global",
        "intro": "Octreotide is a somatostatin analog used for acromegaly and symptom control in neuroendocrine tumors.",
        "mechanism": "Binds somatostatin receptors to suppress growth hormone, IGF-1 and several gastrointestinal hormones.",
        "effectiveness_summary": "Well established for hormone and symptom control in approved indications.",
        "long_description": (
            "Octreotide has decades of clinical use for hormone hypersecretion syndromes. Short and long acting "
            "formulations allow symptom control in carcinoid syndrome and biochemical control in acromegaly, "
            "with monitoring focused on gallbladder, glucose and thyroid effects."
        ),
        "use_case": {
            "slug": "neuroendocrine-tumors",
            "name": "Neuroendocrine Tumors",
            "evidence_grade": "A",
            "consumer_summary": "Reliably reduces hormone related symptoms in approved tumor types.",
            "clinical_summary": "Established symptom and biochemical control with long term safety experience.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults with approved indication",
            "route": "Subcutaneous or intramuscular depot",
            "starting_dose": "Label defined starting regimen",
            "maintenance_dose": "Titrate to symptom and biochemical response",
            "frequency": "Several times daily or monthly depot",
            "notes": "Formulation determines the schedule; follow the label.",
        },
        "safety": {
            "adverse_effects": "Gastrointestinal upset, gallstones and glucose changes are reported.",
            "contraindications": "Known hypersensitivity to octreotide or excipients.",
            "interactions": "May alter absorption of cyclosporine and requirements for insulin or oral hypoglycemics.",
            "monitoring": "Periodic gallbladder imaging, glucose and thyroid function.",
        },
        "claim": {
            "section": "Use cases",
            "claim_text": "Approved labeling supports symptom control in carcinoid tumors and biochemical control in acromegaly.",
            "evidence_grade": "A",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2023-08-01",
        },
        "aliases": ["Sandostatin"],
    },
    {
        "slug": "lanreotide",
        "name": "Lanreotide",
        "peptide_class": "Long acting somatostatin analog peptide",
        "status_model": "approved_global",
        "intro": "Lanreotide is a long acting somatostatin analog used in endocrine and neuroendocrine indications.",
        "mechanism": "Binds somatostatin receptors to suppress pathologic hormone secretion and related symptom burden.",
        "effectiveness_summary": "Supports sustained symptom and biochemical control in approved specialist indications.",
        "long_description": (
            "Lanreotide provides long interval somatostatin analog therapy with established specialist use. "
            "Monthly dosing suits outpatient management, and response depends on disease biology, baseline "
            "markers and adherence to follow up."
        ),
        "use_case": {
            "slug": "acromegaly",
            "name": "Acromegaly",
            "evidence_grade": "A",
            "consumer_summary": "Long acting therapy can support hormonal control with specialist monitoring.",
            "clinical_summary": "Strong specialist evidence for sustained biochemical control in selected patients.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults with approved indication",
            "route": "Deep subcutaneous",
            "starting_dose": "Label based initiation interval",
            "maintenance_dose": "Adjusted by clinical and biochemical response",
            "frequency": "Every 4 weeks or label defined interval",
            "notes": "Interval and dose can be modified per approved treatment goals.",
        },
        "safety": {
            "adverse_effects": "Gastrointestinal effects and injection site reactions are common.",
            "contraindications": "Assess contraindications and specialist caution notes per label.",
            "interactions": "Review endocrine co-therapies and relevant metabolism interactions.",
            "monitoring": "Follow endocrine biomarkers, symptom burden and tolerability.",
        },
        "claim": {
            "section": "Use cases",
            "claim_text": "Lanreotide has established evidence for endocrine control in approved specialist indications.",
            "evidence_grade": "A",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2023-10-03",
        },
        "aliases": ["Somatuline Depot"],
    },
    {
        "slug": "pasireotide",
        "name": "Pasireotide",
        "peptide_class": "Multireceptor somatostatin analog peptide",
        "status_model": "approved_global",
        "intro": "Pasireotide is a somatostatin analog with broad receptor activity used in selected endocrine conditions.",
        "mechanism": "Targets multiple somatostatin receptor subtypes to suppress excess endocrine signaling.",
        "effectiveness_summary": "Benefit in approved endocrine indications, with more intensive monitoring needs.",
        "long_description": (
            "Pasireotide broadens somatostatin analog therapy through wider receptor subtype activity. Treatment "
            "is specialist led and needs closer metabolic monitoring, especially of glucose, with tailored "
            "dosing and proactive adverse effect management."
        ),
        "use_case": {
            "slug": "cushing-disease",
            "name": "Cushing Disease",
            "evidence_grade": "B",
            "consumer_summary": "Can help control hormone excess in selected endocrine conditions with close monitoring.",
            "clinical_summary": "Supports endocrine control with known metabolic monitoring requirements.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults with approved indication",
            "route": "Subcutaneous or intramuscular formulation dependent",
            "starting_dose": "Per label initiation guidance",
            "maintenance_dose": "Adjusted based on endocrine response and tolerance",
            "frequency": "Twice daily or monthly formulation dependent",
            "notes": "Dosing pathway depends on product formulation and indication.",
        },
        "safety": {
            "adverse_effects": "Hyperglycemia, gastrointestinal effects and injection site events may occur.",
            "contraindications": "Review cardiac, hepatic and endocrine cautions from labeling.",
            "interactions": "Assess interactions affecting glycemic control and QT risk profile.",
            "monitoring": "Monitor glucose metrics, endocrine markers and ECG parameters as indicated.",
        },
        "claim": {
            "section": "Safety",
            "claim_text": "Use requires structured metabolic and endocrine monitoring due to class specific risks.",
            "evidence_grade": "B",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2023-05-14",
        },
        "aliases": ["Signifor"],
    },
    # Other approved peptides
    {
        "slug": "tesamorelin",
        "name": "Tesamorelin",
        "peptide_class": "Growth hormone releasing factor analog peptide",
        "status_model": "approved_global",
        "intro": "Tesamorelin is a GHRH analog approved for selected adiposity related indications.",
        "mechanism": "Stimulates endogenous growth hormone signaling through pituitary GHRH receptor activation.",
        "effectiveness_summary": "Supports targeted body composition improvements in approved populations with ongoing treatment.",
        "long_description": (
            "Tesamorelin is a synthetic GHRH analog aimed at body composition endpoints rather than broad "
            "weight loss. Benefit depends on ongoing use and wider metabolic care, with glucose metrics part "
            "of routine monitoring."
        ),
        "use_case": {
            "slug": "hiv-lipodystrophy",
            "name": "HIV Lipodystrophy",
            "evidence_grade": "B",
            "consumer_summary": "Can reduce specific visceral adiposity measures in indicated populations.",
            "clinical_summary": "Supports body composition endpoint improvement in approved HIV related settings.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults with approved indication",
            "route": "Subcutaneous",
            "starting_dose": "Label standard starting regimen",
            "maintenance_dose": "Continue approved daily regimen",
            "frequency": "Daily",
            "notes": "Use indication specific endpoint review during follow up.",
        },
        "safety": {
            "adverse_effects": "Injection site effects and fluid related symptoms can occur.",
            "contraindications": "Assess active malignancy history and endocrine caution statements.",
            "interactions": "Review medications influencing glucose metabolism and the endocrine axis.",
            "monitoring": "Track body composition endpoints and metabolic safety labs.",
        },
        "claim": {
            "section": "Effectiveness",
            "claim_text": "Studies support visceral adiposity improvement in approved HIV related indication contexts.",
            "evidence_grade": "B",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2022-10-08",
        },
        "aliases": ["Egrifta"],
    },
    {
        "slug": "glucagon",
        "name": "Glucagon",
        "peptide_class": "Endogenous counterregulatory hormone peptide",
        "status_model": "approved_global",
        "intro": "Glucagon is used for emergency treatment of severe hypoglycemia and selected diagnostic settings.",
        "mechanism": "Raises blood glucose through hepatic glycogen mobilization and gluconeogenesis.",
        "effectiveness_summary": "Strong evidence supports rapid rescue utility in severe hypoglycemia protocols.",
        "long_description": (
            "Glucagon is the standard rescue peptide for severe hypoglycemia when oral carbohydrate is not "
            "feasible. Effect depends on hepatic glycogen reserve and timely administration, so follow on "
            "carbohydrate and medical review are part of every protocol."
        ),
        "use_case": {
            "slug": "severe-hypoglycemia",
            "name": "Severe Hypoglycemia",
            "evidence_grade": "A",
            "consumer_summary": "Emergency glucagon can rapidly raise blood sugar during severe hypoglycemia events.",
            "clinical_summary": "Established rescue efficacy with broad emergency protocol integration.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults and children per approved products",
            "route": "Intramuscular, subcutaneous or intranasal product dependent",
            "starting_dose": "Administer approved emergency dose",
            "maintenance_dose": "Single rescue dose with protocol based repeat guidance",
            "frequency": "As needed for emergency event",
            "notes": "Follow emergency care protocol after administration.",
        },
        "safety": {
            "adverse_effects": "Nausea and vomiting can occur after administration.",
            "contraindications": "Review product specific contraindications such as selected endocrine tumors.",
            "interactions": "Interactions matter mainly in chronic use; emergency use is primary.",
            "monitoring": "Observe recovery, airway safety and follow on carbohydrate replacement.",
        },
        "claim": {
            "section": "Use cases",
            "claim_text": "Glucagon is a standard emergency rescue treatment for severe hypoglycemia.",
            "evidence_grade": "A",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2024-02-11",
        },
    },
    {
        "slug": "desmopressin",
        "name": "Desmopressin",
        "peptide_class": "Vasopressin analog peptide",
        "status_model": "approved_global",
        "intro": "Desmopressin is a vasopressin analog used in central diabetes insipidus and other approved indications.",
        "mechanism": "Selectively activates renal V2 receptors to increase water reabsorption and reduce urine output.",
        "effectiveness_summary": "Strong evidence supports symptom control in approved antidiuretic indications.",
        "long_description": (
            "Desmopressin is a long established vasopressin analog central to diabetes insipidus management. "
            "Therapy aims to reduce polyuria and nocturia while avoiding water intoxication, so fluid "
            "counseling and sodium monitoring anchor maintenance care."
        ),
        "use_case": {
            "slug": "diabetes-insipidus",
            "name": "Diabetes Insipidus",
            "evidence_grade": "A",
            "consumer_summary": "Reduces excessive urination in central diabetes insipidus when monitored correctly.",
            "clinical_summary": "Longstanding evidence with predictable antidiuretic response and clear monitoring needs.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults and pediatric patients per indication",
            "route": "Intranasal, oral or injectable product dependent",
            "starting_dose": "Label based individualized initiation",
            "maintenance_dose": "Titrate to symptom control and sodium safety",
            "frequency": "Daily or twice daily product dependent",
            "notes": "Fluid guidance and sodium checks are integral to safe use.",
        },
        "safety": {
            "adverse_effects": "Hyponatremia is the major risk if fluid intake is not managed.",
            "contraindications": "Avoid in patients with contraindicated hyponatremia risk profiles.",
            "interactions": "Review medications that influence sodium balance and antidiuretic effect.",
            "monitoring": "Monitor sodium, symptoms of water imbalance and dose timing adherence.",
        },
        "claim": {
            "section": "Safety",
            "claim_text": "Safe use depends on sodium focused monitoring and fluid management counseling.",
            "evidence_grade": "A",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2023-07-19",
        },
        "aliases": ["DDAVP"],
    },
    {
        "slug": "oxytocin",
        "name": "Oxytocin",
        "peptide_class": "Uterotonic hormone peptide",
        "status_model": "approved_global",
        "intro": "Oxytocin is used in obstetric care for labor and postpartum indications under clinical supervision.",
        "mechanism": "Stimulates uterine smooth muscle contraction through oxytocin receptor signaling.",
        "effectiveness_summary": "Extensive clinical evidence supports obstetric use within monitored protocols.",
        "long_description": (
            "Oxytocin is used for labor induction, augmentation and postpartum hemorrhage in protocol guided "
            "settings. Safe administration depends on infusion control and continuous maternal and fetal "
            "monitoring by trained teams."
        ),
        "use_case": {
            "slug": "labor-management",
            "name": "Labor Management",
            "evidence_grade": "A",
            "consumer_summary": "Used in hospital obstetric care to support labor and manage postpartum uterine tone.",
            "clinical_summary": "Established obstetric standard with protocol based effectiveness and safety controls.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Obstetric patients in supervised care",
            "route": "Intravenous infusion or intramuscular postpartum protocol",
            "starting_dose": "Protocol based low initiation rate",
            "maintenance_dose": "Titrate to uterine response under continuous monitoring",
            "frequency": "Continuous infusion or protocol dose",
            "notes": "Use only in monitored obstetric settings.",
        },
        "safety": {
            "adverse_effects": "Excess uterine activity and related fetal distress require close monitoring.",
            "contraindications": "Contraindicated where vaginal delivery is not appropriate.",
            "interactions": "Coordinate with concurrent obstetric medications and anesthesia plans.",
            "monitoring": "Continuous maternal and fetal monitoring during labor use.",
        },
        "claim": {
            "section": "Use cases",
            "claim_text": "Oxytocin is an established obstetric protocol medication for labor and postpartum care.",
            "evidence_grade": "A",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2022-04-28",
        },
    },
    {
        "slug": "bivalirudin",
        "name": "Bivalirudin",
        "peptide_class": "Direct thrombin inhibitor peptide",
        "status_model": "approved_global",
        "intro": "Bivalirudin is an anticoagulant peptide used in selected procedural and cardiovascular contexts.",
        "mechanism": "Directly inhibits thrombin to reduce clot propagation in high risk procedures.",
        "effectiveness_summary": "Supports anticoagulation during specific cardiovascular interventions.",
        "long_description": (
            "Bivalirudin is a parenteral direct thrombin inhibitor for procedural anticoagulation where a "
            "rapid, controlled effect is needed. Dosing follows procedure and renal function, and bleeding "
            "risk is balanced through real time coagulation oversight."
        ),
        "use_case": {
            "slug": "procedural-anticoagulation",
            "name": "Procedural Anticoagulation",
            "evidence_grade": "A",
            "consumer_summary": "Used during certain cardiovascular procedures to reduce clot risk under specialist care.",
            "clinical_summary": "Strong procedural evidence with protocol driven balancing of bleeding and thrombosis.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults in approved procedural indications",
            "route": "Intravenous",
            "starting_dose": "Label bolus and infusion initiation",
            "maintenance_dose": "Protocol infusion adjusted by clinical context",
            "frequency": "Continuous during procedure",
            "notes": "Dosing and duration are procedure specific.",
        },
        "safety": {
            "adverse_effects": "Bleeding is the primary safety concern.",
            "contraindications": "Use caution in active bleeding states and contraindicated scenarios.",
            "interactions": "Coordinate with antiplatelet and anticoagulant co-therapy.",
            "monitoring": "Monitor procedural anticoagulation parameters and bleeding signs.",
        },
        "claim": {
            "section": "Use cases",
            "claim_text": "Bivalirudin has strong evidence for anticoagulation in selected procedural cardiology settings.",
            "evidence_grade": "A",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2023-03-22",
        },
        "aliases": ["Angiomax"],
    },
    {
        "slug": "enfuvirtide",
        "name": "Enfuvirtide",
        "peptide_class": "HIV fusion inhibitor peptide",
        "status_model": "approved_global",
        "intro": "Enfuvirtide is an antiretroviral peptide used in selected multidrug resistant HIV treatment.",
        "mechanism": "Blocks viral fusion with host cells by binding gp41 mediated entry machinery.",
        "effectiveness_summary": "Virologic benefit in treatment experienced populations within optimized regimens.",
        "long_description": (
            "Enfuvirtide is a fusion inhibitor reserved for treatment experienced patients with resistance "
            "constraints. Efficacy relies on an active background regimen, and injection site reactions are "
            "the main barrier to adherence."
        ),
        "use_case": {
            "slug": "hiv-treatment-experienced",
            "name": "HIV Treatment Experienced Care",
            "evidence_grade": "B",
            "consumer_summary": "Can improve viral control in selected resistant HIV treatment contexts.",
            "clinical_summary": "Supports use combined with optimized background antiretroviral therapy.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults and pediatric patients per indication",
            "route": "Subcutaneous",
            "starting_dose": "Label standard dose",
            "maintenance_dose": "Continue fixed dose in combination regimen",
            "frequency": "Twice daily",
            "notes": "Use in specialist guided combination HIV treatment plans.",
        },
        "safety": {
            "adverse_effects": "Injection site reactions are common and may affect persistence.",
            "contraindications": "Review hypersensitivity and indication specific warnings.",
            "interactions": "Coordinate with full antiretroviral regimen planning.",
            "monitoring": "Monitor virologic response, tolerance and adherence barriers.",
        },
        "claim": {
            "section": "Effectiveness",
            "claim_text": "Enfuvirtide improves outcomes in selected treatment experienced HIV populations when regimen optimized.",
            "evidence_grade": "B",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2021-11-17",
        },
        "aliases": ["Fuzeon"],
    },
    # GnRH agonists
    {
        "slug": "leuprolide",
        "name": "Leuprolide",
        "peptide_class": "GnRH agonist peptide",
        "status_model": "approved_global",
        "intro": "Leuprolide is a GnRH agonist used in hormone sensitive conditions under specialist care.",
        "mechanism": "Continuous GnRH receptor stimulation suppresses gonadal steroid production after an initial flare.",
        "effectiveness_summary": "Strong evidence for endocrine suppression in approved oncologic and reproductive indications.",
        "long_description": (
            "Leuprolide is used across oncology, gynecology and endocrine pathways. After an initial flare, "
            "ongoing receptor stimulation suppresses gonadal hormones; long courses need attention to bone "
            "health and metabolic effects."
        ),
        "use_case": {
            "slug": "hormone-sensitive-cancers",
            "name": "Hormone Sensitive Cancers",
            "evidence_grade": "A",
            "consumer_summary": "Widely used to reduce hormone signaling in specific cancer care pathways.",
            "clinical_summary": "Established endocrine suppression therapy with broad evidence in approved indications.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults in approved indications",
            "route": "Intramuscular or subcutaneous depot",
            "starting_dose": "Label depot initiation by indication",
            "maintenance_dose": "Repeat depot at approved interval",
            "frequency": "Monthly to multi month interval",
            "notes": "Interval and formulation depend on indication.",
        },
        "safety": {
            "adverse_effects": "Hot flashes, mood changes and musculoskeletal effects may occur with long term suppression.",
            "contraindications": "Contraindicated in pregnancy in relevant indications.",
            "interactions": "Coordinate with adjunct endocrine and oncologic therapies.",
            "monitoring": "Monitor symptom burden, suppression targets and bone health where indicated.",
        },
        "claim": {
            "section": "Use cases",
            "claim_text": "Leuprolide has strong evidence for hormone suppression in approved oncology related indications.",
            "evidence_grade": "A",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2023-02-09",
        },
        "aliases": ["Lupron"],
    },
    {
        "slug": "triptorelin",
        "name": "Triptorelin",
        "peptide_class": "GnRH agonist peptide",
        "status_model": "approved_global",
        "intro": "Triptorelin is a depot GnRH agonist used for endocrine suppression in approved indications.",
        "mechanism": "Suppresses pituitary gonadotropin signaling after initial receptor stimulation and flare.",
        "effectiveness_summary": "Effective endocrine suppression in approved specialist treatment pathways.",
        "long_description": (
            "Triptorelin is a long acting GnRH agonist whose depot administration sustains hormone "
            "suppression when intervals are kept. Flare management and long term adverse effect monitoring "
            "are part of standard care."
        ),
        "use_case": {
            "slug": "endocrine-suppression",
            "name": "Endocrine Suppression",
            "evidence_grade": "A",
            "consumer_summary": "Provides sustained hormone suppression in approved specialist treatment settings.",
            "clinical_summary": "Robust evidence in approved suppression indications with depot delivery convenience.",
        },
        "dosing": {
            "context": "APPROVED_LABEL",
            "population": "Adults with approved indication",
            "route": "Intramuscular depot",
            "starting_dose": "Label depot initiation regimen",
            "maintenance_dose": "Repeat depot at approved interval",
            "frequency": "Monthly to quarterly formulation dependent",
            "notes": "Interval depends on product and indication.",
        },
        "safety": {
            "adverse_effects": "Class typical hypoestrogenic or hypoandrogenic symptoms can occur.",
            "contraindications": "Review pregnancy and hypersensitivity contraindications.",
            "interactions": "Assess concomitant endocrine and oncologic medication plans.",
            "monitoring": "Monitor suppression effect, symptom profile and long term risk markers.",
        },
        "claim": {
            "section": "Use cases",
            "claim_text": "Triptorelin provides sustained endocrine suppression in approved specialist use cases.",
            "evidence_grade": "A",
            "source_url": FDA_LABEL_SOURCE,
            "source_title": "openFDA drug label data",
            "published_at": "2022-06-06",
        },
    },
    # Regionally approved
    {
        "slug": "thymosin-alpha-1",
        "name": "Thymosin Alpha-1",
        "peptide_class": "Immunomodulatory thymic peptide",
        "status_model": "non_us_approved_only",
        "intro": "Thymosin alpha-1 is an immunomodulatory peptide with country specific regulatory status.",
        "mechanism": "Proposed to modulate innate and adaptive immune signaling through thymic related mechanisms.",
        "effectiveness_summary": "Evidence is mixed by indication, stronger in selected non US regulatory contexts.",
        "long_description": (
            "Thymosin alpha-1 is used in selected regions under indication specific frameworks, while US status "
            "remains investigational. Evidence strength varies with disease context, trial design and endpoints, "
            "so interpretation should stay anchored to indication level data."
        ),
        "use_case": {
            "slug": "immune-modulation",
            "name": "Immune Modulation",
            "evidence_grade": "C",
            "consumer_summary": "Evidence varies by indication and country; interpret broad claims cautiously.",
            "clinical_summary": "Mixed study quality with indication dependent signal and regional differences.",
        },
        "dosing": {
            "context": "STUDY_REPORTED",
            "population": "Indication specific cohorts",
            "route": "Subcutaneous",
            "starting_dose": "Protocol dependent",
            "maintenance_dose": "Protocol dependent",
            "frequency": "Several times weekly in many study designs",
            "notes": "Use is region and indication specific; verify local regulation.",
        },
        "safety": {
            "adverse_effects": "Injection site effects and mild systemic symptoms in some studies.",
            "contraindications": "Vary by country specific labeling and indication.",
            "interactions": "Assess risk with immunotherapies and immunosuppressive regimens.",
            "monitoring": "Indication specific endpoints and adverse effects under specialist guidance.",
        },
        "claim": {
            "section": "Regulatory status",
            "claim_text": "Regulatory status differs by jurisdiction, with broader non US use than current US pathways.",
            "evidence_grade": "C",
            "source_url": TRIALS_SOURCE,
            "source_title": "ClinicalTrials.gov API",
            "published_at": "2024-04-01",
        },
    },
    # Research peptides
    {
        "slug": "bpc-157",
        "name": "BPC-157",
        "peptide_class": "Synthetic gastric peptide fragment",
        "status_model": "investigational_all",
        "intro": "BPC-157 is widely discussed for recovery, but high quality human evidence remains limited.",
        "mechanism": "Proposed tissue signaling and angiogenic effects; translational certainty in humans is low.",
        "effectiveness_summary": "Evidence is insufficient for broad clinical claims and remains investigational.",
        "long_description": (
            "BPC-157 draws significant consumer interest on the back of limited human data. Many public claims "
            "are extrapolated from preclinical work, and product quality varies because sourcing lacks "
            "standardized manufacturing transparency."
        ),
        "use_case": {
            "slug": "tissue-repair",
            "name": "Tissue Repair",
            "evidence_grade": "C",
            "consumer_summary": "Human evidence remains early and uncertain despite high online visibility.",
            "clinical_summary": "Mostly preclinical or low certainty support with limited human endpoint data.",
        },
        "dosing": {
            "context": "STUDY_REPORTED",
            "population": "Small investigational cohorts",
            "route": "Varies by study",
            "starting_dose": "Protocol specific",
            "maintenance_dose": "Protocol specific",
            "frequency": "Varies",
            "notes": INVESTIGATIONAL_NOTE,
        },
        "safety": {
            "adverse_effects": "Safety profile is incompletely characterized in controlled human studies.",
            "contraindications": "No validated contraindication framework is established.",
            "interactions": "Interaction profile is uncertain due to limited clinical data.",
            "monitoring": "Protocol based monitoring and source quality verification if studied.",
        },
        "claim": {
            "section": "Research",
            "claim_text": "Current human evidence is limited and does not establish broad clinical effectiveness claims.",
            "evidence_grade": "C",
            "source_url": TRIALS_SOURCE,
            "source_title": "ClinicalTrials.gov API",
            "published_at": "2024-02-20",
        },
        "aliases": ["Body Protection Compound"],
    },
    {
        "slug": "tb-500",
        "name": "TB-500",
        "peptide_class": "Thymosin beta-4 fragment research peptide",
        "status_model": "investigational_all",
        "intro": "TB-500 is a research peptide with limited controlled human data for health related claims.",
        "mechanism": "Proposed actions on cell migration and tissue remodeling, based mainly on preclinical research.",
        "effectiveness_summary": "Evidence quality is low for most consumer discussed use cases.",
        "long_description": (
            "TB-500 appears mostly in research or recovery discussions, with sparse rigorous human evidence. "
            "Plausibility is inferred from preclinical observations rather than clinical endpoint trials."
        ),
        "use_case": {
            "slug": "recovery-support",
            "name": "Recovery Support",
            "evidence_grade": "C",
            "consumer_summary": "Claims are common online, but robust human evidence is limited.",
            "clinical_summary": "Low certainty evidence with major translation gaps from preclinical findings.",
        },
        "dosing": {
            "context": "STUDY_REPORTED",
            "population": "Investigational cohorts",
            "route": "Varies by protocol",
            "starting_dose": "Protocol specific",
            "maintenance_dose": "Protocol specific",
            "frequency": "Varies",
            "notes": INVESTIGATIONAL_NOTE,
        },
        "safety": {
            "adverse_effects": "Comprehensive human safety characterization is not established.",
            "contraindications": "Contraindication framework remains unclear.",
            "interactions": "Interaction data are limited and non definitive.",
            "monitoring": "Protocol based monitoring in formal research settings.",
        },
        "claim": {
            "section": "Research",
            "claim_text": "Current TB-500 evidence is predominantly preclinical and low certainty for clinical translation.",
            "evidence_grade": "C",
            "source_url": TRIALS_SOURCE,
            "source_title": "ClinicalTrials.gov API",
            "published_at": "2024-03-10",
        },
        "aliases": ["Thymosin Beta-4 fragment"],
    },
    # Growth hormone secretagogues
    {
        "slug": "ipamorelin",
        "name": "Ipamorelin",
        "peptide_class": "Growth hormone secretagogue research peptide",
        "status_model": "investigational_all",
        "intro": "Ipamorelin is a research secretagogue with limited clinical evidence for broad health claims.",
        "mechanism": "Stimulates growth hormone release through ghrelin receptor mediated pathways.",
        "effectiveness_summary": "Human evidence is limited and does not support broad marketing claims.",
        "long_description": (
            "Ipamorelin is referenced as a selective growth hormone secretagogue in performance and wellness "
            "discussions. Most claims exceed controlled human evidence, and multi compound protocols confound "
            "what little observational data exists."
        ),
        "use_case": {
            "slug": "growth-hormone-secretagogue",
            "name": "Growth Hormone Secretagogue",
            "evidence_grade": "C",
            "consumer_summary": "Evidence is limited and does not support broad effectiveness claims.",
            "clinical_summary": "Low certainty human evidence with substantial external validity limits.",
        },
        "dosing": {
            "context": "STUDY_REPORTED",
            "population": "Small investigational cohorts",
            "route": "Subcutaneous",
            "starting_dose": "Protocol specific",
            "maintenance_dose": "Protocol specific",
            "frequency": "Daily or protocol dependent",
            "notes": INVESTIGATIONAL_NOTE,
        },
        "safety": {
            "adverse_effects": "Safety is incompletely characterized in long term human studies.",
            "contraindications": "Standards are not established for non trial use.",
            "interactions": "Caution with endocrine active therapies.",
            "monitoring": "Endocrine and adverse event monitoring in research protocols.",
        },
        "claim": {
            "section": "Research",
            "claim_text": "Ipamorelin remains investigational with low certainty human evidence for broad health outcomes.",
            "evidence_grade": "C",
            "source_url": TRIALS_SOURCE,
            "source_title": "ClinicalTrials.gov API",
            "published_at": "2024-01-31",
        },
    },
    {
        "slug": "cjc-1295",
        "name": "CJC-1295",
        "peptide_class": "GHRH analog research peptide",
        "status_model": "investigational_all",
        "intro": "CJC-1295 is an investigational GHRH analog discussed in growth hormone research.",
        "mechanism": "Engineered to prolong growth hormone releasing hormone signaling through extended pharmacokinetics.",
        "effectiveness_summary": "Human evidence is limited, with insufficient data for broad conclusions.",
        "long_description": (
            "CJC-1295 is a modified GHRH analog studied for prolonged endocrine signaling. Public interest "
            "outpaces trial quality, and co-administration with other compounds complicates safety and "
            "efficacy interpretation."
        ),
        "use_case": {
            "slug": "growth-hormone-secretagogue",
            "name": "Growth Hormone Secretagogue",
            "evidence_grade": "C",
            "consumer_summary": "Evidence is early and does not justify broad treatment claims.",
            "clinical_summary": "Low certainty and limited controlled data for actionable conclusions.",
        },
        "dosing": {
            "context": "STUDY_REPORTED",
            "population": "Investigational endocrine cohorts",
            "route": "Subcutaneous",
            "starting_dose": "Protocol specific",
            "maintenance_dose": "Protocol specific",
            "frequency": "Protocol dependent",
            "notes": INVESTIGATIONAL_NOTE,
        },
        "safety": {
            "adverse_effects": "Long term safety is incompletely defined in clinical studies.",
            "contraindications": "Validated contraindication frameworks are limited.",
            "interactions": "Endocrine interaction concerns require protocol level oversight.",
            "monitoring": "Endocrine markers and adverse effects in formal research settings.",
        },
        "claim": {
            "section": "Research",
            "claim_text": "CJC-1295 currently has limited high quality human evidence for broad clinical claims.",
            "evidence_grade": "C",
            "source_url": TRIALS_SOURCE,
            "source_title": "ClinicalTrials.gov API",
            # same registry snapshot as ipamorelin; ingested as a single citation
            "published_at": "2024-01-31",
        },
    },
]

SEED_CATALOG: Tuple[PeptideSeed, ...] = tuple(PeptideSeed.from_dict(d) for d in SEED_RECORDS)


if __name__ == "__main__":
    print(f"Seed catalog: {len(SEED_CATALOG)} peptides")
    for seed in SEED_CATALOG:
        codes = ", ".join(
            f"{code.value}={status_for_jurisdiction(seed.status_model, code).value}"
            for code, _ in JURISDICTIONS
        )
        print(f"  • {seed.name:<18} {codes}")
