"""Seed catalog of data brokers, in scan order."""

from brokers.base import BrokerInfo

BROKER_CATALOG: tuple[BrokerInfo, ...] = (
    BrokerInfo(
        name="Whitepages",
        url="https://www.whitepages.com/",
        category="people-search",
        priority="high",
        opt_out_url="https://www.whitepages.com/suppression-requests",
        opt_out_process="Search for your listing → click 'Information Control' → verify via email",
        required_info=("Full Name", "Current Address", "Phone Number", "Age", "Email Address", "Previous Addresses"),
        estimated_processing_time="24-48 hours",
        difficulty_rating=2,
    ),
    BrokerInfo(
        name="Spokeo",
        url="https://www.spokeo.com/",
        category="people-search",
        priority="high",
        opt_out_url="https://www.spokeo.com/optout",
        opt_out_process="Search for your profile → copy profile URL → submit via opt-out form → verify email",
        required_info=("Full Name", "Address History", "Phone Numbers", "Relatives", "Social Profiles"),
        estimated_processing_time="7-14 days",
        difficulty_rating=3,
    ),
    BrokerInfo(
        name="BeenVerified",
        url="https://www.beenverified.com/",
        category="people-search",
        priority="high",
        opt_out_url="https://www.beenverified.com/app/optout/search",
        opt_out_process="Search by name + state → select record → enter email → verify link in email",
        required_info=("Full Name", "Age & DOB", "Addresses", "Phone Numbers", "Criminal Records"),
        estimated_processing_time="24-48 hours",
        difficulty_rating=2,
    ),
    BrokerInfo(
        name="Intelius",
        url="https://www.intelius.com/",
        category="people-search",
        priority="medium",
        opt_out_url="https://www.intelius.com/optout",
        opt_out_process=(
            "Call (888) 245-1655 OR email support@mailer.intelius.com OR fill online form. "
            "May require driver's license"
        ),
        required_info=("Full Name", "Contact Info", "Address History", "Associates"),
        estimated_processing_time="30-45 days",
        difficulty_rating=4,
    ),
    BrokerInfo(
        name="MyLife",
        url="https://www.mylife.com/",
        category="people-search",
        priority="high",
        opt_out_url="https://www.mylife.com/privacy-policy",
        opt_out_process=(
            "Call (888) 704-1900, press 2, request removal OR email privacy@mylife.com "
            "with name + profile link"
        ),
        required_info=("Full Profile", "Contact Info", "Reputation Score", "Reviews"),
        estimated_processing_time="14-30 days",
        difficulty_rating=3,
    ),
    BrokerInfo(
        name="PeopleFinders",
        url="https://www.peoplefinders.com/",
        category="people-search",
        priority="high",
        opt_out_url="https://www.peoplefinders.com/manage",
        opt_out_process="Search → submit opt-out form → email verification",
        required_info=("Full Name", "Age", "Addresses", "Phone Numbers", "Relatives"),
        estimated_processing_time="7-14 days",
        difficulty_rating=2,
    ),
    BrokerInfo(
        name="Radaris",
        url="https://radaris.com/",
        category="people-search",
        priority="medium",
        opt_out_url="https://radaris.com/control",
        opt_out_process="Search for profile → click 'Control Information' → verify via email",
        required_info=("Full Name", "Addresses", "Phone Numbers", "Associates", "Public Records"),
        estimated_processing_time="24-72 hours",
        difficulty_rating=2,
    ),
    BrokerInfo(
        name="PeekYou",
        url="https://www.peekyou.com/",
        category="people-search",
        priority="medium",
        opt_out_url="https://www.peekyou.com/about/contact/ccpa_optout/do_not_sell/",
        opt_out_process="Search → submit name + state → opt-out form → email verification",
        required_info=("Full Name", "Social Media Profiles", "Photos", "Contact Info"),
        estimated_processing_time="7-14 days",
        difficulty_rating=2,
    ),
    BrokerInfo(
        name="ThatsThem",
        url="https://thatsthem.com/",
        category="people-search",
        priority="medium",
        opt_out_url="https://thatsthem.com/optout",
        opt_out_process="Search → submit profile URL → email verification",
        required_info=("Full Name", "Phone Numbers", "Addresses", "Email Addresses"),
        estimated_processing_time="24-48 hours",
        difficulty_rating=2,
    ),
    BrokerInfo(
        name="USPhonebook",
        url="https://www.usphonebook.com/",
        category="people-search",
        priority="low",
        opt_out_url="https://www.usphonebook.com/",
        opt_out_process="Search and opt-out on same page",
        required_info=("Name", "Phone Number", "Address"),
        estimated_processing_time="24 hours",
        difficulty_rating=1,
    ),
    BrokerInfo(
        name="Acxiom",
        url="https://www.acxiom.com/",
        category="marketing",
        priority="medium",
        opt_out_url="https://isapps.acxiom.com/optout/optout.aspx",
        opt_out_process="Scroll to footer → 'Do Not Sell My Personal Information' → complete opt-out form",
        required_info=("Name", "Address", "Email", "Phone"),
        estimated_processing_time="30 days",
        difficulty_rating=2,
    ),
    BrokerInfo(
        name="Epsilon",
        url="https://www.epsilon.com/",
        category="marketing",
        priority="medium",
        opt_out_url="https://www.epsilon.com/us/privacy-policy",
        opt_out_process="Contact via privacy form",
        required_info=("Name", "Address", "Email"),
        estimated_processing_time="30 days",
        difficulty_rating=3,
    ),
    BrokerInfo(
        name="LiveRamp",
        url="https://liveramp.com/",
        category="marketing",
        priority="medium",
        opt_out_url="https://liveramp.com/privacy/my-privacy-choices/",
        opt_out_process="Submit privacy request",
        required_info=("Email", "Name"),
        estimated_processing_time="30 days",
        difficulty_rating=2,
    ),
    BrokerInfo(
        name="Experian",
        url="https://www.experian.com/",
        category="credit",
        priority="high",
        opt_out_url="https://consumerprivacy.experian.com/",
        opt_out_process="Submit request via consumer privacy portal",
        required_info=("Name", "Address", "SSN", "DOB"),
        estimated_processing_time="30 days",
        difficulty_rating=3,
    ),
    BrokerInfo(
        name="Equifax",
        url="https://www.equifax.com/",
        category="credit",
        priority="high",
        opt_out_url="https://www.equifax.com/personal/",
        opt_out_process="Opt-out from pre-approved credit offers + targeted marketing",
        required_info=("Name", "Address", "SSN", "DOB"),
        estimated_processing_time="30 days",
        difficulty_rating=3,
    ),
    BrokerInfo(
        name="TransUnion",
        url="https://www.transunion.com/",
        category="credit",
        priority="high",
        opt_out_url="https://www.transunion.com/privacy",
        opt_out_process="Submit privacy request",
        required_info=("Name", "Address", "SSN", "DOB"),
        estimated_processing_time="30 days",
        difficulty_rating=3,
    ),
    BrokerInfo(
        name="CheckPeople",
        url="https://www.checkpeople.com/",
        category="people-search",
        priority="medium",
        opt_out_url="https://www.checkpeople.com/optout",
        opt_out_process="Submit opt-out form with personal information",
        required_info=("Full Name", "Age", "State"),
        estimated_processing_time="7-14 days",
        difficulty_rating=2,
    ),
    BrokerInfo(
        name="Nuwber",
        url="https://nuwber.com/",
        category="people-search",
        priority="medium",
        opt_out_url="https://nuwber.com/removal/link",
        opt_out_process="Submit removal request form",
        required_info=("Full Name", "Phone Number", "Address"),
        estimated_processing_time="24-72 hours",
        difficulty_rating=2,
    ),
    BrokerInfo(
        name="FastPeopleSearch",
        url="https://www.fastpeoplesearch.com/",
        category="people-search",
        priority="medium",
        opt_out_url="https://www.fastpeoplesearch.com/removal",
        opt_out_process="Search for record → submit removal request",
        required_info=("Full Name", "Current Address", "Age"),
        estimated_processing_time="24-48 hours",
        difficulty_rating=2,
    ),
    BrokerInfo(
        name="FamilyTreeNow",
        url="https://www.familytreenow.com/",
        category="people-search",
        priority="medium",
        opt_out_url="https://www.familytreenow.com/optout",
        opt_out_process="Search for record → submit opt-out request",
        required_info=("Full Name", "Age", "State", "Family Members"),
        estimated_processing_time="24-72 hours",
        difficulty_rating=2,
    ),
)
