"""Sample community questions with their expected categories."""

TEST_QUESTIONS = [
    {
        "title": "What food should I give my Labrador puppy?",
        "content": "My 4 month old Labrador puppy won't eat kibble and seems hungry all the time.",
        "expected_category": "food",
        "challenge": "Puppy and breed words also pull towards training and general",
    },
    {
        "title": "Dog vomiting since morning",
        "content": "My beagle has been vomiting and has diarrhea, not eating anything. Urgent help needed, which vet should I see?",
        "expected_category": "health",
        "challenge": "Straightforward - strong symptom signals",
    },
    {
        "title": "Barking problem at night",
        "content": "My dog is barking constantly and biting the furniture. He is aggressive with guests too.",
        "expected_category": "behavior",
        "challenge": "No question mark, intent comes from problem phrasing",
    },
    {
        "title": "Best dog trainer in Pune",
        "content": "Looking for a local trainer near Kothrud for my 2 years old german shepherd.",
        "expected_category": "local",
        "challenge": "Trainer keywords could pull towards training",
    },
    {
        "title": "How to train my puppy to sit",
        "content": "Need training tips for basic commands, she is 12 weeks old and very energetic.",
        "expected_category": "training",
        "challenge": "Commands and sit are also behavior keywords",
    },
    {
        "title": "mera dog khana nahi kha raha, kya karu?",
        "content": "4 saal ka dog hai, kal se kuch nahi khaya.",
        "expected_category": "general",
        "challenge": "Hinglish with no English category keywords",
    },
    {
        "title": "Thanks for the help",
        "content": "Just wanted to say thank you, the vet recommendation worked great.",
        "expected_category": "health",
        "challenge": "Gratitude message, not a question at all",
    },
]
